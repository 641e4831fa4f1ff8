"""Resolve and synthesize the command that launches Serena as an MCP server."""

from .config import ContextServerSettings, describe_configuration, parse_settings
from .errors import (
    ConfigurationError,
    DiscoveryFailure,
    LauncherError,
    PathResolutionError,
)
from .extension import ContextServerExtension, SerenaContextServerExtension
from .runtime import LaunchCommand
from .synthesizer import CommandSynthesizer

__all__ = [
    "CommandSynthesizer",
    "ConfigurationError",
    "ContextServerExtension",
    "ContextServerSettings",
    "DiscoveryFailure",
    "LaunchCommand",
    "LauncherError",
    "PathResolutionError",
    "SerenaContextServerExtension",
    "describe_configuration",
    "parse_settings",
]
