"""Settings and configuration documents for the Serena context server."""

from .describe import (
    ContextServerConfiguration,
    describe_configuration,
    settings_schema,
)
from .parser import (
    CONTEXT_SERVER_ID,
    ContextServerSettings,
    find_settings_file,
    load_settings,
    parse_settings,
    settings_for_server,
)

__all__ = [
    "CONTEXT_SERVER_ID",
    "ContextServerConfiguration",
    "ContextServerSettings",
    "describe_configuration",
    "find_settings_file",
    "load_settings",
    "parse_settings",
    "settings_for_server",
    "settings_schema",
]
