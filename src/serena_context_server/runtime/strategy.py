"""Launch strategy selection: companion console script or `-m` module."""

from __future__ import annotations

import logging
import ntpath
import os
import shutil
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import PathResolutionError
from .specs import SERENA_AGENT, AgentSpec

logger = logging.getLogger(__name__)


class LaunchStrategySelector:
    """Chooses how to start the agent for a resolved interpreter.

    The agent may be installed with a console script next to the
    interpreter, or only as an importable package. Both work:
    - script present: run `<dir>/serena start-mcp-server`
    - script absent: run `<python> -m serena.cli start-mcp-server`
    """

    def __init__(self, agent: AgentSpec = SERENA_AGENT):
        self.agent = agent

    def select(self, interpreter_path: str) -> Tuple[str, List[str]]:
        """Return (command, args) for the given interpreter.

        Raises:
            PathResolutionError: If the path is empty or names a root directory
        """
        directory = self._interpreter_directory(interpreter_path)

        script = None
        if directory is not None:
            script = self._find_companion_script(directory, interpreter_path)
        if script is not None:
            logger.info("Launching %s via console script %s", self.agent.script_name, script)
            return str(script), [self.agent.server_command]

        logger.info(
            "No %s script next to %s, using module invocation",
            self.agent.script_name,
            interpreter_path,
        )
        return interpreter_path, ["-m", self.agent.module, self.agent.server_command]

    def _interpreter_directory(self, interpreter_path: str) -> Optional[Path]:
        """Locate the directory holding the interpreter.

        Returns None for a bare name missing from this process's PATH; the
        host spawns with its own PATH and may still find it.
        """
        # Windows paths may arrive on any host, so split on both separators
        head, tail = ntpath.split(interpreter_path.rstrip("/\\"))
        if not tail:
            # Empty, a root such as "/" or "C:\", or a bare drive
            raise PathResolutionError(interpreter_path)
        if head:
            return Path(head)

        # Bare executable name, look up where PATH resolves it
        located = shutil.which(tail)
        if not located:
            logger.debug("%s is not on PATH, skipping console script lookup", tail)
            return None
        return Path(os.path.dirname(located))

    def _find_companion_script(
        self, directory: Path, interpreter_path: str
    ) -> Optional[Path]:
        """Return the agent's console script in `directory`, if present."""
        names = [self.agent.script_name]
        if interpreter_path.lower().endswith(".exe"):
            # Windows venvs put entry points in Scripts/ as serena.exe
            names = [self.agent.script_name + suffix for suffix in self.agent.windows_suffixes] + names

        for name in names:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None
