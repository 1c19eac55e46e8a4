"""
Endpoint Table.

Each registry operation is one Endpoint: an HTTP verb, a path template
filled from the parameter schema, the fields rendered into the query
string, and whether the schema is sent as a JSON body.
"""

from dataclasses import dataclass
from urllib.parse import urlencode

from pydantic import BaseModel

from harborctl.core.config import url_for


@dataclass(frozen=True)
class Endpoint:
    """One REST operation against the registry."""

    method: str
    path: str
    query: tuple[str, ...] = ()
    sends_body: bool = False

    def url(self, params: BaseModel) -> str:
        """Build the target URL, query fields in declaration order."""
        values = params.model_dump()
        target = url_for(self.path.format(**values))
        if self.query:
            target += "?" + urlencode([(key, values[key]) for key in self.query])
        return target

    def body(self, params: BaseModel) -> str | None:
        """Compact JSON of the schema for write endpoints, else None."""
        if not self.sends_body:
            return None
        return params.model_dump_json()


LABELS_PATH = "/api/labels"
LABEL_PATH = LABELS_PATH + "/{id}"

LABEL_ENDPOINTS: dict[str, Endpoint] = {
    "list": Endpoint(
        "GET",
        LABELS_PATH,
        query=("scope", "name", "project_id", "page", "page_size"),
    ),
    "create": Endpoint("POST", LABELS_PATH, sends_body=True),
    "get": Endpoint("GET", LABEL_PATH),
    "delete": Endpoint("DELETE", LABEL_PATH),
    "update": Endpoint("PUT", LABEL_PATH, sends_body=True),
}
