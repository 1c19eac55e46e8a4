"""
HTTP Client for CLI.

Provides the HTTP client for communicating with the registry API.
All requests include X-Frontend-ID: cli header for log routing.
"""

from typing import Any

import httpx

from harborctl.core.config import get_registry_url
from harborctl.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for registry API communication.

    Features:
    - Automatic base URL from settings
    - X-Frontend-ID header for log routing
    - Structured logging of requests/responses
    - No retries; the HTTP client's default timeout applies

    Usage:
        client = APIClient()
        response = client.request("GET", "/api/labels/100")
        response = client.request("POST", "/api/labels", content='{"name": "test"}')
    """

    def __init__(self, base_url: str | None = None):
        """
        Initialize the API client.

        Args:
            base_url: Registry base URL. If None, reads from config/settings/application.yaml.
        """
        self.base_url = (base_url or get_registry_url()).rstrip("/")
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={"X-Frontend-ID": "cli"},
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the registry.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: API path or absolute URL
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On transport failure
        """
        client = self._get_client()

        log_with_source(logger, "cli", "debug", "API request", method=method, url=url)

        try:
            response = client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                url=url,
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response


# Module-level client instance
_client: APIClient | None = None


def get_api_client() -> APIClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = APIClient()
    return _client


def close_api_client() -> None:
    """Close the API client."""
    global _client
    if _client:
        _client.close()
        _client = None
