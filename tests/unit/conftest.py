"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always mocked.
Unit tests should be fast and isolated, never touching a real registry.
"""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import httpx
import pytest

import harborctl.cli.client as client_module


@pytest.fixture
def mock_request() -> Generator[MagicMock, None, None]:
    """
    Patch httpx.Client.request so no request leaves the process.

    Returns 200 with an empty JSON list unless the test changes return_value.

    Usage:
        def test_get(mock_request: MagicMock):
            mock_request.return_value = httpx.Response(404, text="not found")
    """
    client_module._client = None
    with patch.object(httpx.Client, "request") as mocked:
        mocked.return_value = httpx.Response(200, text="[]")
        yield mocked
    client_module._client = None
