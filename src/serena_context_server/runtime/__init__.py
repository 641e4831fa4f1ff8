"""Interpreter discovery and launch strategy selection."""

from .discovery import InterpreterDiscovery
from .specs import PYTHON_RUNTIME, SERENA_AGENT
from .strategy import LaunchStrategySelector
from .types import LaunchCommand, ProbeResult
from .validation import is_accepted_version, is_path_acceptable

__all__ = [
    "InterpreterDiscovery",
    "LaunchStrategySelector",
    "LaunchCommand",
    "ProbeResult",
    "PYTHON_RUNTIME",
    "SERENA_AGENT",
    "is_accepted_version",
    "is_path_acceptable",
]
