"""Settings parsing for the Serena context server."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigurationError

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONTEXT_SERVER_ID = "serena-context-server"
SETTINGS_FILE_NAME = ".serena-context.toml"


class ContextServerSettings(BaseModel):
    """User settings for launching Serena.

    Unknown keys are ignored so that host-side additions never break a launch.
    """

    model_config = {
        "extra": "ignore",
        "frozen": True,
        "title": "SerenaContextServerSettings",
    }

    python_executable: Optional[str] = Field(
        default=None,
        description="Python executable to use (optional, defaults to auto-detection)",
    )
    environment: Optional[Dict[str, str]] = Field(
        default=None,
        description="Additional environment variables for Serena",
    )


def parse_settings(raw: Any) -> Optional[ContextServerSettings]:
    """Validate a raw settings value supplied by the host.

    Args:
        raw: None, a mapping, JSON text, or an existing settings object

    Returns:
        Parsed settings, or None when the host supplied none

    Raises:
        ConfigurationError: If the value does not match the settings schema
    """
    if raw is None or isinstance(raw, ContextServerSettings):
        return raw

    try:
        if isinstance(raw, (str, bytes)):
            return ContextServerSettings.model_validate_json(raw)
        if isinstance(raw, Mapping):
            return ContextServerSettings.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e

    raise ConfigurationError(
        f"Invalid settings: expected an object, got {type(raw).__name__}"
    )


def settings_for_server(
    document: Mapping[str, Any],
    server_id: str = CONTEXT_SERVER_ID,
) -> Optional[ContextServerSettings]:
    """Extract this server's settings from a host settings document.

    The host keeps per-server settings at
    `context_servers.<server_id>.settings`, e.g.:

        {"context_servers": {"serena-context-server": {"settings": {...}}}}

    Returns:
        Parsed settings, or None if the document has no entry for the server
    """
    servers = document.get("context_servers")
    if not isinstance(servers, Mapping):
        return None

    entry = servers.get(server_id)
    if not isinstance(entry, Mapping):
        return None

    return parse_settings(entry.get("settings"))


def find_settings_file(project_path: Path) -> Optional[Path]:
    """Find .serena-context.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to the settings file if found, None otherwise
    """
    settings_file = Path(project_path) / SETTINGS_FILE_NAME
    if settings_file.is_file():
        return settings_file
    return None


def load_settings(project_path: Path) -> Optional[ContextServerSettings]:
    """Load settings from .serena-context.toml, if the project has one.

    Example file:

        python_executable = "/opt/homebrew/bin/python3.11"

        [environment]
        SERENA_LOG_LEVEL = "debug"

    Raises:
        ConfigurationError: If the file cannot be read, is not valid TOML
            or fails validation
    """
    settings_file = find_settings_file(project_path)
    if not settings_file:
        return None

    try:
        with open(settings_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid settings in {settings_file}: {e}") from e

    logger.debug("Loaded settings from %s", settings_file)
    return parse_settings(data)


def default_settings_document() -> str:
    """Default settings shown to users, with auto-detection enabled."""
    return json.dumps({"python_executable": None}, indent=2) + "\n"
