"""Launch-command synthesis: settings + discovery + strategy -> LaunchCommand."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config.parser import ContextServerSettings
from .errors import ConfigurationError
from .platform import Os, sanitize_windows_path
from .runtime.discovery import InterpreterDiscovery
from .runtime.strategy import LaunchStrategySelector
from .runtime.types import LaunchCommand

logger = logging.getLogger(__name__)


class CommandSynthesizer:
    """Builds the command the host runs to start Serena.

    Never installs anything and never starts the agent itself.
    """

    def __init__(
        self,
        discovery: Optional[InterpreterDiscovery] = None,
        selector: Optional[LaunchStrategySelector] = None,
    ):
        self.discovery = discovery or InterpreterDiscovery()
        self.selector = selector or LaunchStrategySelector()

    def synthesize(
        self,
        settings: Optional[ContextServerSettings] = None,
        platform: Optional[Os] = None,
    ) -> LaunchCommand:
        """Resolve the launch command.

        Priority for the interpreter:
        1. `python_executable` from settings, used verbatim
        2. Auto-discovery

        Args:
            settings: Parsed user settings, if any
            platform: Target platform (defaults to the current one)

        Raises:
            ConfigurationError: If the configured interpreter is empty
            DiscoveryFailure: If no override is set and discovery finds nothing
            PathResolutionError: If the interpreter path is empty or a root directory
        """
        python_exe = self._resolve_interpreter(settings)

        if not python_exe:
            raise ConfigurationError("Python executable path cannot be empty")

        python_path = sanitize_windows_path(python_exe, platform)
        command, args = self.selector.select(python_path)

        return LaunchCommand(
            command=command,
            args=args,
            env=self._environment(settings),
        )

    def _resolve_interpreter(self, settings: Optional[ContextServerSettings]) -> str:
        if settings is not None and settings.python_executable is not None:
            logger.debug("Using configured interpreter %r", settings.python_executable)
            return settings.python_executable
        return self.discovery.discover()

    @staticmethod
    def _environment(settings: Optional[ContextServerSettings]) -> List[Tuple[str, str]]:
        if settings is None or not settings.environment:
            return []
        return list(settings.environment.items())
