"""Declarative interpreter and agent specifications.

This is DATA, not code. To accept a new Python release or add an
installation root, edit the tables here; discovery walks them in order.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class VersionCheck:
    """Configuration for probing an interpreter's version."""
    args: List[str]
    runtime_name: str  # Token the probe output starts with, e.g. "Python"


@dataclass(frozen=True)
class InterpreterSpec:
    """Complete discovery specification for an interpreter."""
    display_name: str
    config_key: str
    accepted_versions: List[str]  # "<major>.<minor>", most recent first
    preferred_names: List[str]  # Looked up on PATH first
    fallback_candidates: List[str]  # Absolute paths, then bare names
    trusted_prefixes: List[str]
    version_check: VersionCheck

    @property
    def accepted_prefixes(self) -> List[str]:
        """Version-output prefixes such as "Python 3.12"."""
        name = self.version_check.runtime_name
        return [f"{name} {version}" for version in self.accepted_versions]


@dataclass(frozen=True)
class AgentSpec:
    """How the external agent is packaged and started."""
    package_name: str
    script_name: str  # Console script generated next to the interpreter
    module: str  # Importable module run with `-m`
    server_command: str
    windows_suffixes: List[str] = field(default_factory=lambda: [".exe", ".cmd"])


PYTHON_RUNTIME = InterpreterSpec(
    display_name="Python",
    config_key="python_executable",
    accepted_versions=["3.12", "3.11"],
    preferred_names=["python3.12", "python3.11"],
    fallback_candidates=[
        "/opt/homebrew/bin/python3.12",
        "/opt/homebrew/bin/python3.11",
        "/usr/local/bin/python3.12",
        "/usr/local/bin/python3.11",
        "/usr/bin/python3.12",
        "/usr/bin/python3.11",
        "python3.12",
        "python3.11",
        # Unversioned names last; the version probe still has to pass
        "python3",
        "python",
    ],
    trusted_prefixes=[
        "/usr/",
        "/opt/",
        "/bin/",
        "/Library/Frameworks/Python.framework/",
    ],
    version_check=VersionCheck(
        args=["--version"],
        runtime_name="Python",
    ),
)


SERENA_AGENT = AgentSpec(
    package_name="serena-agent",
    script_name="serena",
    module="serena.cli",
    server_command="start-mcp-server",
)
