"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs from the project root so config/settings/*.yaml resolves,
with the registry address pinned and the session file pointed at tmp_path.
"""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from harborctl.core.config import get_app_config, get_settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent
REGISTRY_URL = "https://harbor.test"
SESSION_TOKEN = "0123456789abcdef"


@pytest.fixture(autouse=True)
def _project_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run from project root with deterministic overrides and fresh config caches."""
    monkeypatch.chdir(PROJECT_ROOT)
    monkeypatch.setenv("HARBORCTL_REGISTRY_URL", REGISTRY_URL)
    monkeypatch.setenv("HARBORCTL_COOKIE_FILE", str(tmp_path / "missing.cookie.yaml"))
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)


@pytest.fixture
def session_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Write a valid session file and point the config at it.

    Usage:
        def test_sends_cookie(session_file: Path):
            ...
    """
    path = tmp_path / ".cookie.yaml"
    path.write_text(f"beegosessionID: {SESSION_TOKEN}\n", encoding="utf-8")
    monkeypatch.setenv("HARBORCTL_COOKIE_FILE", str(path))
    get_settings.cache_clear()
    return path
