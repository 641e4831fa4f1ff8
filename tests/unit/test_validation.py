"""Unit tests for interpreter path and version predicates."""

import pytest

from serena_context_server.runtime.validation import (
    MAX_PATH_LENGTH,
    is_accepted_version,
    is_path_acceptable,
)


class TestIsPathAcceptable:
    """Test interpreter path validation."""

    @pytest.mark.parametrize(
        "path",
        [
            "/usr/bin/python3.11",
            "/opt/homebrew/bin/python3.12",
            "python3.11",
            "python",
            "C:\\Python311\\python.exe",
            "/home/me/.pyenv/versions/3.12.1/bin/Python3.12",
        ],
    )
    def test_accepts_python_paths(self, path):
        assert is_path_acceptable(path)

    def test_accepts_trusted_prefix_without_python_marker(self):
        """Paths under trusted roots pass even without "python" in them."""
        assert is_path_acceptable("/usr/local/bin/py3")
        assert is_path_acceptable("/opt/tools/interp")

    def test_rejects_untrusted_path_without_python_marker(self):
        assert not is_path_acceptable("/home/me/bin/interp")
        assert not is_path_acceptable("sh")

    def test_rejects_empty(self):
        assert not is_path_acceptable("")

    def test_rejects_null_bytes(self):
        assert not is_path_acceptable("path\0with\0null")
        assert not is_path_acceptable("/usr/bin/python3.11\0")

    def test_rejects_long_paths(self):
        assert not is_path_acceptable("/usr/bin/python" + "x" * MAX_PATH_LENGTH)
        assert not is_path_acceptable("p" * 1000)

    def test_length_limit_is_exclusive(self):
        path = "/usr/" + "p" * (MAX_PATH_LENGTH - 6)
        assert len(path) == MAX_PATH_LENGTH - 1
        assert is_path_acceptable(path)
        assert not is_path_acceptable(path + "n")

    @pytest.mark.parametrize(
        "path",
        [
            "/usr/bin/../../tmp/python",
            "../python3.11",
            "/opt/python/..",
            "C:\\Python311\\..\\evil\\python.exe",
        ],
    )
    def test_rejects_traversal_even_with_python(self, path):
        assert not is_path_acceptable(path)

    @pytest.mark.parametrize(
        "path",
        [
            "/usr//bin/python3.11",
            "//server/share/python",
            "C:\\\\Python311\\python.exe",
        ],
    )
    def test_rejects_doubled_separators_even_with_python(self, path):
        assert not is_path_acceptable(path)

    def test_dots_inside_names_are_not_traversal(self):
        assert is_path_acceptable("/opt/python..3/bin/python")
        assert is_path_acceptable("/usr/bin/python3.11")

    def test_custom_trusted_prefixes(self):
        assert is_path_acceptable("/nix/store/abc/bin/interp", trusted_prefixes=["/nix/"])
        assert not is_path_acceptable("/usr/bin/interp", trusted_prefixes=["/nix/"])


class TestIsAcceptedVersion:
    """Test version output matching."""

    @pytest.mark.parametrize(
        "output",
        [
            "Python 3.11.7",
            "Python 3.11",
            "Python 3.11.0\n",
            "  Python 3.11.5  ",
            "Python 3.11 (default, Oct  5 2023)",
            "Python 3.12.0",
            "Python 3.12.1",
            "Python 3.12 (main, build info)",
            "Python 3.12.0rc1",
        ],
    )
    def test_accepts_supported_versions(self, output):
        assert is_accepted_version(output)

    @pytest.mark.parametrize(
        "output",
        [
            "Python 3.110.0",
            "Python 3.120",
            "Python 3.11a",
            "Python 3.9.0",
            "Python 3.10.0",
            "Python 3.13.0",
            "Python 2.7.0",
            "",
            "3.11.7",
            "CPython 3.11.7",
        ],
    )
    def test_rejects_other_versions(self, output):
        assert not is_accepted_version(output)

    def test_prefix_must_start_the_output(self):
        """A naive substring match would accept this."""
        assert not is_accepted_version("Not Python 3.11.7")

    def test_custom_prefixes(self):
        assert is_accepted_version("Python 3.13.0", accepted_prefixes=["Python 3.13"])
        assert not is_accepted_version("Python 3.12.0", accepted_prefixes=["Python 3.13"])
