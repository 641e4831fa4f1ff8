"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from serena_context_server.platform import Os


@pytest.fixture
def python_bin(tmp_path) -> Path:
    """Create a fake interpreter layout without a Serena console script.

    Creates:
        tmp_path/
            bin/
                python3.12
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    python = bin_dir / "python3.12"
    python.write_text("#!/bin/sh\necho 'Python 3.12.1'\n")
    python.chmod(0o755)
    return python


@pytest.fixture
def python_bin_with_script(python_bin) -> Path:
    """Fake interpreter with a `serena` console script next to it."""
    script = python_bin.parent / "serena"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    return python_bin


@pytest.fixture
def linux() -> Os:
    """Platform for tests that must not depend on the machine running them."""
    return Os.LINUX
