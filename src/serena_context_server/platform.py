"""Platform detection and host path workarounds."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional


class Os(str, Enum):
    """Operating system classes the host distinguishes."""

    MAC = "mac"
    LINUX = "linux"
    WINDOWS = "windows"


def current_platform() -> Os:
    """Return the operating system class of the running process."""
    if sys.platform == "darwin":
        return Os.MAC
    if sys.platform in ("win32", "cygwin"):
        return Os.WINDOWS
    return Os.LINUX


def sanitize_windows_path(path: str, platform: Optional[Os] = None) -> str:
    """Remove the leading `/` the host's path layer adds on Windows.

    The host hands Windows paths over as `/C:/Python311/python.exe`.
    On macOS and Linux this is a no-op.

    Args:
        path: Interpreter path as configured or discovered
        platform: Platform to sanitize for (defaults to the current one)
    """
    if platform is None:
        platform = current_platform()

    if platform == Os.WINDOWS:
        return path.lstrip("/")
    return path
