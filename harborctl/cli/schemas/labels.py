"""
Label Schemas.

Pydantic schemas for label request parameters. Field names and order match
the JSON the registry expects on the wire.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

Scope = Literal["g", "p"]
"""'g' for global labels, 'p' for project labels."""


def now_timestamp() -> str:
    """Current UTC time in the registry's timestamp format."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def _require_project(scope: str, project_id: int) -> None:
    if scope == "p" and project_id <= 0:
        raise ValueError("project_id is required when scope is 'p'")


class LabelsListParams(BaseModel):
    """Query parameters for listing labels."""

    scope: Scope = Field(description="The label scope")
    name: str = Field(default="", description="The label name as filter")
    project_id: int = Field(default=0, ge=0, description="Relevant project ID")
    page: int = Field(default=1, ge=1, description="The page number")
    page_size: int = Field(default=10, ge=1, le=100, description="The size of per page")

    @model_validator(mode="after")
    def _check_project(self) -> "LabelsListParams":
        _require_project(self.scope, self.project_id)
        return self


class LabelCreate(BaseModel):
    """Schema for creating a new label."""

    id: int = Field(default=0, ge=0, description="Label ID, generated by the registry when 0")
    name: str = Field(..., min_length=1, description="The name of label")
    description: str = Field(..., min_length=1, description="The description of label")
    color: str = Field(
        default="#000000",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="The color code of label",
        examples=["#A9B6BE"],
    )
    scope: Scope = Field(default="g", description="The scope of label")
    project_id: int = Field(default=0, ge=0, description="Owning project when scope is 'p'")
    creation_time: str = Field(default="", validate_default=True)
    update_time: str = Field(default="", validate_default=True)
    deleted: bool = False

    @field_validator("creation_time", "update_time", mode="before")
    @classmethod
    def _default_now(cls, value: str | None) -> str:
        return value or now_timestamp()

    @model_validator(mode="after")
    def _check_project(self) -> "LabelCreate":
        _require_project(self.scope, self.project_id)
        return self


class LabelUpdate(BaseModel):
    """
    Schema for updating an existing label.

    The registry ignores creation_time and update_time on update, so they
    are not sent.
    """

    id: int = Field(..., ge=1, description="Label ID")
    name: str = Field(..., min_length=1, description="The name of label")
    description: str = Field(..., min_length=1, description="The description of label")
    color: str = Field(default="#000000", pattern=r"^#[0-9A-Fa-f]{6}$")
    scope: Scope = "g"
    project_id: int = Field(default=0, ge=0)
    deleted: bool = False

    @model_validator(mode="after")
    def _check_project(self) -> "LabelUpdate":
        _require_project(self.scope, self.project_id)
        return self


class LabelIdParams(BaseModel):
    """Path parameter for get and delete by ID."""

    id: int = Field(..., ge=1, description="Label ID")
