"""Data types for interpreter resolution and launch commands."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a version probe that was spawned and completed.

    Attributes:
        candidate: Executable that was probed
        returncode: Exit status of the probe
        stdout: Captured standard output
    """

    candidate: str
    returncode: int
    stdout: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class LaunchCommand:
    """Fully resolved command handed to the host for process creation.

    Attributes:
        command: Executable path or name (never empty)
        args: Ordered argument vector
        env: Ordered (name, value) pairs; duplicates are passed through as given
    """

    command: str
    args: List[str] = field(default_factory=list)
    env: List[Tuple[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("LaunchCommand.command cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Render for JSON output."""
        return {
            "command": self.command,
            "args": list(self.args),
            "env": [[name, value] for name, value in self.env],
        }

    def __repr__(self) -> str:
        argv = " ".join([self.command] + list(self.args))
        env_note = f" +{len(self.env)} env" if self.env else ""
        return f"<LaunchCommand {argv}{env_note}>"
