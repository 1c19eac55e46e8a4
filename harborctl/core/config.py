"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional overrides from
environment variables (HARBORCTL_*) or config/.env.

Settings (YAML):
    application.yaml   - App identity, registry address, session file
    logging.yaml       - Logging configuration

Overrides (environment):
    HARBORCTL_REGISTRY_URL  - Registry base address
    HARBORCTL_COOKIE_FILE   - Path of the persisted session file
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from harborctl.core.config_schema import ApplicationSchema, LoggingSchema
from harborctl.core.exceptions import ConfigurationError


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to application.yaml."""

    registry_url: str | None = None
    cookie_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="HARBORCTL_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached overrides instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_registry_url() -> str:
    """
    Get the registry base address.

    Returns:
        Base URL without trailing slash, e.g. https://localhost
    """
    url = get_settings().registry_url or get_app_config().application.registry.url
    return url.rstrip("/")


def url_for(path: str) -> str:
    """
    Combine the registry base address with an endpoint path.

    Args:
        path: Endpoint path starting with "/", e.g. /api/labels

    Returns:
        Absolute target URL.
    """
    return get_registry_url() + path


def get_cookie_file_path() -> Path:
    """Get the session file path. Relative paths resolve against project root."""
    configured = get_settings().cookie_file or get_app_config().application.session.cookie_file
    path = Path(configured).expanduser()
    if not path.is_absolute():
        path = find_project_root() / path
    return path
