"""Serena installation status checks.

Read-only: reports whether the agent package is importable by an
interpreter, and how to install it. Nothing here installs anything, and
launch-command resolution never calls it.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..runtime.specs import SERENA_AGENT, AgentSpec

logger = logging.getLogger(__name__)


class AgentStatus(Enum):
    """Installation status of the agent for one interpreter."""

    INSTALLED = "installed"
    MISSING = "missing"
    UNKNOWN = "unknown"  # Could not ask the interpreter (restricted environment)


@dataclass
class AgentInstallInfo:
    """Information about the agent installation for an interpreter."""

    python_executable: str
    package_name: str
    status: AgentStatus
    version: Optional[str] = None

    @property
    def install_hint(self) -> str:
        return f"{self.python_executable} -m pip install {self.package_name}"


# Asks the interpreter's own package metadata, for environments without pip
METADATA_SNIPPET = "import importlib.metadata as m, sys; print(m.version(sys.argv[1]))"


def _run(args: List[str], timeout: float) -> Optional[subprocess.CompletedProcess]:
    try:
        return subprocess.run(args, capture_output=True, text=True, timeout=timeout)
    except (subprocess.TimeoutExpired, OSError) as e:
        # Restricted environments may not allow spawning the interpreter at all
        logger.debug("Could not run %s: %s", args[0], e)
        return None


def _check_metadata(info: AgentInstallInfo, timeout: float) -> AgentInstallInfo:
    """Fall back to importlib.metadata when pip itself is missing."""
    result = _run(
        [info.python_executable, "-c", METADATA_SNIPPET, info.package_name], timeout
    )
    if result is None:
        return info

    if result.returncode == 0:
        info.status = AgentStatus.INSTALLED
        info.version = result.stdout.strip() or None
    elif "PackageNotFoundError" in result.stderr:
        info.status = AgentStatus.MISSING
    else:
        logger.debug("Metadata check failed for %s: %s", info.python_executable, result.stderr)
    return info


def check_agent_installed(
    python_executable: str,
    agent: AgentSpec = SERENA_AGENT,
    timeout: float = 15.0,
) -> AgentInstallInfo:
    """Check whether the agent package is installed for an interpreter.

    Asks `pip show` first. Interpreters without pip (uv-built venvs, for
    instance) are asked through importlib.metadata instead.

    Args:
        python_executable: Interpreter to ask
        agent: Agent whose package to look for
        timeout: Seconds to wait for each check

    Returns:
        AgentInstallInfo; UNKNOWN when neither check gives an answer
    """
    info = AgentInstallInfo(
        python_executable=python_executable,
        package_name=agent.package_name,
        status=AgentStatus.UNKNOWN,
    )

    result = _run([python_executable, "-m", "pip", "show", agent.package_name], timeout)
    if result is None:
        return info

    if result.returncode != 0:
        if "No module named pip" in result.stderr:
            logger.debug("pip is not available for %s", python_executable)
            return _check_metadata(info, timeout)
        info.status = AgentStatus.MISSING
        return info

    info.status = AgentStatus.INSTALLED
    for line in result.stdout.splitlines():
        if line.startswith("Version:"):
            info.version = line.split(":", 1)[1].strip()
            break

    return info
