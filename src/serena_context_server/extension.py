"""Context-server extension facade consumed by the host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import (
    CONTEXT_SERVER_ID,
    ContextServerConfiguration,
    describe_configuration,
    parse_settings,
)
from .platform import Os
from .runtime.types import LaunchCommand
from .synthesizer import CommandSynthesizer


class ContextServerExtension(ABC):
    """Capabilities a host needs from a context-server extension."""

    @abstractmethod
    def context_server_command(
        self,
        server_id: str,
        settings: Any = None,
        platform: Optional[Os] = None,
    ) -> LaunchCommand:
        """Resolve the command that starts the context server.

        Args:
            server_id: Identifier the host registered the server under
            settings: Raw user settings (mapping, JSON text or None)
            platform: Target platform (defaults to the current one)
        """
        ...

    @abstractmethod
    def context_server_configuration(self, server_id: str) -> ContextServerConfiguration:
        """Describe the settings the context server accepts."""
        ...


class SerenaContextServerExtension(ContextServerExtension):
    """Launches Serena as an MCP server for the host.

    The host creates one instance and calls it per launch request; the
    instance holds no state between calls.
    """

    server_id = CONTEXT_SERVER_ID

    def __init__(self, synthesizer: Optional[CommandSynthesizer] = None):
        self.synthesizer = synthesizer or CommandSynthesizer()

    def context_server_command(
        self,
        server_id: str = CONTEXT_SERVER_ID,
        settings: Any = None,
        platform: Optional[Os] = None,
    ) -> LaunchCommand:
        user_settings = parse_settings(settings)
        return self.synthesizer.synthesize(user_settings, platform)

    def context_server_configuration(
        self, server_id: str = CONTEXT_SERVER_ID
    ) -> ContextServerConfiguration:
        return describe_configuration()
