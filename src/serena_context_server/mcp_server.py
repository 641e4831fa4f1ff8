"""MCP server and command line for the Serena context-server launcher.

Exposes launch-command resolution as MCP tools using FastMCP, and as a
small CLI for hosts that shell out instead of speaking MCP.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcp.server import FastMCP

from .bootstrap import AgentStatus, check_agent_installed
from .config import (
    ContextServerSettings,
    load_settings,
    parse_settings,
    settings_for_server,
)
from .errors import ConfigurationError, LauncherError
from .extension import SerenaContextServerExtension
from .runtime.discovery import InterpreterDiscovery

logger = logging.getLogger(__name__)

mcp = FastMCP("Serena Context Server")


def _error_dict(error: LauncherError) -> Dict[str, Any]:
    return {
        "available": False,
        "error": str(error),
        "error_type": type(error).__name__,
    }


# ============================================================================
# Tools
# ============================================================================


@mcp.tool()
async def resolve_launch_command(
    settings: Dict[str, Any] | None = None,
    project_path: str | None = None,
) -> Dict[str, Any]:
    """Resolve the command that starts Serena as an MCP server.

    Settings priority:
    1. `settings` argument (same shape as the host's context server settings)
    2. .serena-context.toml in `project_path`
    3. Auto-detection of Python 3.11/3.12

    Args:
        settings: Optional {"python_executable": ..., "environment": {...}}
        project_path: Optional project whose .serena-context.toml to read

    Returns:
        On success: available=True plus command, args and env
        On failure: available=False plus error and error_type
    """
    extension = SerenaContextServerExtension()
    try:
        if settings is None and project_path:
            settings = load_settings(Path(project_path))
        command = extension.context_server_command(settings=settings)
    except LauncherError as e:
        return _error_dict(e)

    return {"available": True, **command.to_dict()}


@mcp.tool()
async def describe_configuration() -> Dict[str, Any]:
    """Get setup instructions, default settings and the settings JSON schema."""
    configuration = SerenaContextServerExtension().context_server_configuration()
    return asdict(configuration)


@mcp.tool()
async def check_installation(python_executable: str | None = None) -> Dict[str, Any]:
    """Check whether serena-agent is installed for an interpreter.

    Read-only; never installs anything.

    Args:
        python_executable: Interpreter to check. Auto-detected if omitted.

    Returns:
        python_executable, package_name, status (installed/missing/unknown),
        version and install_hint
    """
    if not python_executable:
        try:
            python_executable = InterpreterDiscovery().discover()
        except LauncherError as e:
            return _error_dict(e)

    info = check_agent_installed(python_executable)
    return {
        "python_executable": info.python_executable,
        "package_name": info.package_name,
        "status": info.status.value,
        "version": info.version,
        "install_hint": info.install_hint,
    }


# ============================================================================
# Entry Point
# ============================================================================


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serena-context-server",
        description="Resolve the command that launches Serena as an MCP server",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log discovery details to stderr"
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Run the MCP server on stdio (default)")

    resolve = subparsers.add_parser("resolve", help="Print the launch command as JSON")
    resolve.add_argument(
        "--settings", help="Settings as JSON text, e.g. '{\"python_executable\": null}'"
    )
    resolve.add_argument(
        "--project", type=Path, help="Read settings from <project>/.serena-context.toml"
    )
    resolve.add_argument(
        "--host-settings",
        type=Path,
        help="Read settings from a host settings.json (context_servers.<id>.settings)",
    )

    check = subparsers.add_parser("check", help="Check whether serena-agent is installed")
    check.add_argument("--python", help="Interpreter to check (auto-detected if omitted)")

    subparsers.add_parser("describe", help="Print the configuration documents as JSON")
    return parser


def _read_host_settings(path: Path) -> Optional[ContextServerSettings]:
    try:
        document = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e}") from e
    if not isinstance(document, dict):
        raise ConfigurationError(f"Invalid settings in {path}: expected an object")
    return settings_for_server(document)


def _resolve(args: argparse.Namespace) -> int:
    extension = SerenaContextServerExtension()
    try:
        if args.settings is not None:
            settings = parse_settings(args.settings)
        elif args.host_settings is not None:
            settings = _read_host_settings(args.host_settings)
        elif args.project is not None:
            settings = load_settings(args.project)
        else:
            settings = None
        command = extension.context_server_command(settings=settings)
    except LauncherError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    logger.debug("Resolved %r", command)
    print(json.dumps(command.to_dict(), indent=2))
    return 0


def _check(args: argparse.Namespace) -> int:
    python_executable = args.python
    if not python_executable:
        try:
            python_executable = InterpreterDiscovery().discover()
        except LauncherError as e:
            print(f"❌ {e}", file=sys.stderr)
            return 1

    info = check_agent_installed(python_executable)
    if info.status == AgentStatus.INSTALLED:
        version_str = f" ({info.version})" if info.version else ""
        print(f"✅ {info.package_name}{version_str}: {python_executable}", file=sys.stderr)
        return 0
    if info.status == AgentStatus.MISSING:
        print(f"❌ {info.package_name} is not installed for {python_executable}", file=sys.stderr)
    else:
        print(f"⚠️  Could not check {info.package_name} for {python_executable}", file=sys.stderr)
    print(f"   Install: {info.install_hint}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    With no subcommand, runs the MCP server on stdio. stdout is reserved
    for the MCP protocol or JSON output; everything else goes to stderr.

    Example:
        serena-context-server resolve --settings '{"environment": {"SERENA_LOG_LEVEL": "debug"}}'
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "resolve":
        return _resolve(args)
    if args.command == "check":
        return _check(args)
    if args.command == "describe":
        configuration = SerenaContextServerExtension().context_server_configuration()
        print(json.dumps(asdict(configuration), indent=2))
        return 0

    print("🚀 Starting Serena Context Server (MCP)", file=sys.stderr)
    print("", file=sys.stderr)

    # FastMCP handles the server lifecycle and stdio communication
    mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
