"""Tests for OxlintRunner."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from oxlint_x.core.binary import BinaryNotFoundError
from oxlint_x.core.runner import ExecutionResult, OxlintExecutionError, OxlintRunner


@pytest.fixture
def provider():
    mock = MagicMock()
    mock.build_exec_args.side_effect = lambda args: ["/bin/oxlint", *args]
    return mock


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestExecute:
    """Subprocess invocation and result capture."""

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_success(self, mock_run, provider, tmp_path):
        mock_run.return_value = completed(stdout='{"diagnostics": []}')

        result = OxlintRunner(provider, timeout=5).execute(["--format=json", "a.js"], cwd=tmp_path)

        assert result == ExecutionResult(stdout='{"diagnostics": []}', stderr="", returncode=0)
        argv = mock_run.call_args.args[0]
        assert argv == ["/bin/oxlint", "--format=json", "a.js"]
        kwargs = mock_run.call_args.kwargs
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["timeout"] == 5
        assert kwargs["capture_output"] is True

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_nonzero_exit_with_stdout_is_not_an_error(self, mock_run, provider):
        mock_run.return_value = completed(stdout='{"diagnostics": [1]}', stderr="warn", returncode=1)

        result = OxlintRunner(provider).execute(["a.js"])

        assert result.returncode == 1
        assert result.stderr == "warn"

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_nonzero_exit_with_only_stderr(self, mock_run, provider):
        mock_run.return_value = completed(stderr="bad config", returncode=2)

        with pytest.raises(OxlintExecutionError, match="exited with code 2") as exc_info:
            OxlintRunner(provider).execute(["a.js"])

        assert exc_info.value.returncode == 2
        assert "bad config" in str(exc_info.value)

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_timeout(self, mock_run, provider):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="oxlint", timeout=1.5)

        with pytest.raises(OxlintExecutionError, match="timed out") as exc_info:
            OxlintRunner(provider, timeout=1.5).execute(["a.js"])

        assert exc_info.value.timeout == 1.5

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_start_failure(self, mock_run, provider):
        mock_run.side_effect = FileNotFoundError("no such file")

        with pytest.raises(OxlintExecutionError, match="Failed to start oxlint"):
            OxlintRunner(provider).execute(["a.js"])

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_output_limit(self, mock_run, provider):
        mock_run.return_value = completed(stdout="x" * 101)

        with pytest.raises(OxlintExecutionError, match="exceeds 100 bytes"):
            OxlintRunner(provider, max_output_bytes=100).execute(["a.js"])

    @patch("oxlint_x.core.runner.subprocess.run")
    def test_missing_binary(self, mock_run):
        provider = MagicMock()
        provider.build_exec_args.side_effect = BinaryNotFoundError("oxlint not found")

        with pytest.raises(OxlintExecutionError, match="oxlint not found"):
            OxlintRunner(provider).execute(["a.js"])

        mock_run.assert_not_called()
