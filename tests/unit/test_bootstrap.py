"""Unit tests for agent installation checks."""

import subprocess
from unittest.mock import patch

from serena_context_server.bootstrap import AgentStatus, check_agent_installed
from tests.helpers.probe_helpers import completed

PIP_SHOW_OUTPUT = """Name: serena-agent
Version: 0.1.4
Summary: A coding agent toolkit
Location: /usr/lib/python3.11/site-packages
"""


class TestCheckAgentInstalled:
    """Test read-only installation status checks."""

    @patch("subprocess.run")
    def test_installed(self, mock_run):
        mock_run.return_value = completed([], stdout=PIP_SHOW_OUTPUT)

        info = check_agent_installed("/usr/bin/python3.11")

        assert info.status == AgentStatus.INSTALLED
        assert info.version == "0.1.4"
        assert mock_run.call_args.args[0] == [
            "/usr/bin/python3.11", "-m", "pip", "show", "serena-agent",
        ]

    @patch("subprocess.run")
    def test_missing(self, mock_run):
        mock_run.return_value = completed([], returncode=1)

        info = check_agent_installed("/usr/bin/python3.11")

        assert info.status == AgentStatus.MISSING
        assert info.version is None
        assert info.install_hint == "/usr/bin/python3.11 -m pip install serena-agent"

    @patch("subprocess.run")
    def test_unknown_when_pip_cannot_run(self, mock_run):
        mock_run.side_effect = PermissionError(1, "Operation not permitted")

        info = check_agent_installed("/usr/bin/python3.11")

        assert info.status == AgentStatus.UNKNOWN

    @patch("subprocess.run")
    def test_unknown_on_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(["pip"], 15)

        info = check_agent_installed("/usr/bin/python3.11", timeout=15)

        assert info.status == AgentStatus.UNKNOWN

    @patch("subprocess.run")
    def test_never_installs(self, mock_run):
        mock_run.return_value = completed([], returncode=1)

        check_agent_installed("/usr/bin/python3.11")

        for call in mock_run.call_args_list:
            assert "install" not in call.args[0]


class TestWithoutPip:
    """Test interpreters that have no pip, such as uv-built venvs."""

    NO_PIP = completed([], returncode=1, stderr="/venv/bin/python: No module named pip\n")

    @patch("subprocess.run")
    def test_installed_without_pip(self, mock_run):
        mock_run.side_effect = [self.NO_PIP, completed([], stdout="0.1.4\n")]

        info = check_agent_installed("/venv/bin/python")

        assert info.status == AgentStatus.INSTALLED
        assert info.version == "0.1.4"
        metadata_args = mock_run.call_args_list[1].args[0]
        assert metadata_args[:2] == ["/venv/bin/python", "-c"]
        assert metadata_args[-1] == "serena-agent"

    @patch("subprocess.run")
    def test_missing_without_pip(self, mock_run):
        not_found = completed(
            [], returncode=1,
            stderr="importlib.metadata.PackageNotFoundError: No package metadata was found for serena-agent\n",
        )
        mock_run.side_effect = [self.NO_PIP, not_found]

        info = check_agent_installed("/venv/bin/python")

        assert info.status == AgentStatus.MISSING

    @patch("subprocess.run")
    def test_unknown_when_metadata_check_fails(self, mock_run):
        broken = completed([], returncode=1, stderr="ModuleNotFoundError: No module named 'importlib.metadata'\n")
        mock_run.side_effect = [self.NO_PIP, broken]

        info = check_agent_installed("/venv/bin/python")

        assert info.status == AgentStatus.UNKNOWN

    @patch("subprocess.run")
    def test_unknown_when_metadata_check_times_out(self, mock_run):
        mock_run.side_effect = [self.NO_PIP, subprocess.TimeoutExpired(["python"], 15)]

        info = check_agent_installed("/venv/bin/python")

        assert info.status == AgentStatus.UNKNOWN

    @patch("subprocess.run")
    def test_pip_miss_skips_metadata_check(self, mock_run):
        mock_run.return_value = completed([], returncode=1, stderr="WARNING: Package(s) not found: serena-agent\n")

        info = check_agent_installed("/usr/bin/python3.11")

        assert info.status == AgentStatus.MISSING
        assert mock_run.call_count == 1
