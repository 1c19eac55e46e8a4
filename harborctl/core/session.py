"""
Session Store.

Loads the session token saved by a previous login. The file is YAML with a
single key:

    beegosessionID: 0123456789abcdef

This module only reads the file; it never creates or refreshes it.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from harborctl.core.config import get_cookie_file_path
from harborctl.core.exceptions import SessionError
from harborctl.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

SESSION_COOKIE_NAME = "beegosessionID"
LANGUAGE_COOKIE_NAME = "harbor-lang"


class SessionCookie(BaseModel):
    """Persisted session credential."""

    beegosession_id: str = Field(alias=SESSION_COOKIE_NAME, min_length=1)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def load_session(path: Path | None = None) -> SessionCookie:
    """
    Read the session token from disk.

    Args:
        path: Session file. Defaults to the configured cookie file.

    Returns:
        SessionCookie

    Raises:
        SessionError: If the file is missing, unreadable, malformed, or has no token.
    """
    cookie_path = path if path is not None else get_cookie_file_path()

    try:
        # BaseLoader keeps every scalar a string, so numeric tokens stay as written.
        raw = yaml.load(cookie_path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
    except OSError as e:
        log_with_source(logger, "session", "error", "Session file unreadable", path=str(cookie_path))
        raise SessionError(f"cannot read session file {cookie_path}: {e}") from e
    except yaml.YAMLError as e:
        raise SessionError(f"malformed session file {cookie_path}: {e}") from e

    if not isinstance(raw, dict):
        raise SessionError(f"session file {cookie_path} has no {SESSION_COOKIE_NAME}")

    try:
        session = SessionCookie.model_validate(raw)
    except ValidationError as e:
        raise SessionError(f"session file {cookie_path} has no {SESSION_COOKIE_NAME}") from e

    log_with_source(logger, "session", "debug", "Session loaded", path=str(cookie_path))
    return session


def cookie_header(session: SessionCookie, language: str = "") -> str:
    """Render the Cookie header value for a session."""
    parts = []
    if language:
        parts.append(f"{LANGUAGE_COOKIE_NAME}={language}")
    parts.append(f"{SESSION_COOKIE_NAME}={session.beegosession_id}")
    return "; ".join(parts)
