"""Error types raised while resolving the Serena launch command."""

from __future__ import annotations

from typing import List, Sequence


class LauncherError(Exception):
    """Base class for all launch-command resolution errors."""


class ConfigurationError(LauncherError):
    """Raised when user settings are malformed or unusable."""


class PathResolutionError(LauncherError):
    """Raised when an interpreter path has no resolvable parent directory."""

    def __init__(self, interpreter_path: str):
        self.interpreter_path = interpreter_path
        super().__init__(
            f"Could not determine Python directory for {interpreter_path!r}"
        )


class ProbeSpawnFailure(LauncherError):
    """A version probe could not be spawned or exited abnormally.

    Only ever raised inside discovery, which skips to the next candidate.
    """

    def __init__(self, candidate: str, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"{candidate}: {reason}")


class DiscoveryFailure(LauncherError):
    """Raised when no interpreter candidate passed validation and version checks."""

    def __init__(
        self,
        attempted: Sequence[str],
        required_versions: Sequence[str],
        config_key: str = "python_executable",
    ):
        self.attempted: List[str] = list(attempted)
        self.required_versions: List[str] = list(required_versions)
        self.config_key = config_key
        super().__init__(self._format_error_message())

    def _format_error_message(self) -> str:
        """Format a user-friendly error message."""
        versions = " or ".join(self.required_versions)
        lines = [
            f"Python {versions} not found. "
            f"Serena requires Python {'-'.join(sorted(self.required_versions))}.",
            "",
            "Tried:",
        ]

        for candidate in self.attempted:
            lines.append(f"  • {candidate}")

        lines.extend(
            [
                "",
                "Please install a compatible version, or point the extension at one",
                "explicitly in the context server settings:",
                f'  "{self.config_key}": "/path/to/python{self.required_versions[0]}"',
            ]
        )

        return "\n".join(lines)
