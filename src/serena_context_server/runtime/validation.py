"""Pure predicates applied to auto-discovered interpreter candidates."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from .specs import PYTHON_RUNTIME

MAX_PATH_LENGTH = 1000

_SEPARATORS = re.compile(r"[/\\]")


def is_path_acceptable(
    path: str,
    trusted_prefixes: Optional[Sequence[str]] = None,
) -> bool:
    """Validate an interpreter path for basic security checks.

    Rejects empty or overlong paths, NUL bytes, `..` segments and doubled
    separators. The remaining path must either mention "python" or live
    under a trusted installation root.

    Args:
        path: Candidate path or bare executable name
        trusted_prefixes: Roots accepted without the "python" marker.
            Defaults to the Python runtime's trusted prefixes.

    Returns:
        True if the candidate may be executed
    """
    if not path or len(path) >= MAX_PATH_LENGTH:
        return False
    if "\0" in path:
        return False

    if ".." in _SEPARATORS.split(path):
        return False
    if "//" in path or "\\\\" in path:
        return False

    if "python" in path.lower():
        return True

    if trusted_prefixes is None:
        trusted_prefixes = PYTHON_RUNTIME.trusted_prefixes
    return any(path.startswith(prefix) for prefix in trusted_prefixes)


def is_accepted_version(
    version_output: str,
    accepted_prefixes: Optional[Sequence[str]] = None,
) -> bool:
    """Check whether `--version` output reports an accepted release.

    A prefix only matches when it is followed by the end of the string, a
    `.` or whitespace, so "Python 3.110.0" does not match "Python 3.11".

    Args:
        version_output: Raw probe output, e.g. "Python 3.11.7\\n"
        accepted_prefixes: Prefixes such as "Python 3.12".
            Defaults to the Python runtime's accepted versions.
    """
    if accepted_prefixes is None:
        accepted_prefixes = PYTHON_RUNTIME.accepted_prefixes

    text = version_output.strip()
    for prefix in accepted_prefixes:
        if not text.startswith(prefix):
            continue
        rest = text[len(prefix):]
        if not rest or rest[0] == "." or rest[0].isspace():
            return True

    return False
