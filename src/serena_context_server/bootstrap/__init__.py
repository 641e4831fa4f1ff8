"""Bootstrap utilities for checking the agent's environment."""

from .agent_check import (
    AgentInstallInfo,
    AgentStatus,
    check_agent_installed,
)

__all__ = [
    "AgentInstallInfo",
    "AgentStatus",
    "check_agent_installed",
]
