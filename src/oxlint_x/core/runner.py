"""Synchronous execution of the oxlint binary."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from oxlint_x.core.binary import BinaryNotFoundError, BinaryProvider


class OxlintExecutionError(RuntimeError):
    """Raised when oxlint cannot be run or fails without producing output."""

    def __init__(self, message: str, returncode: int | None = None, timeout: float | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.timeout = timeout


class OxlintOutputError(RuntimeError):
    """Raised when oxlint output cannot be decoded."""


@dataclass(frozen=True)
class ExecutionResult:
    """Captured result of one oxlint invocation."""

    stdout: str
    stderr: str
    returncode: int


class OxlintRunner:
    """Runs oxlint with a timeout and an output size limit."""

    def __init__(
        self,
        binary_provider: BinaryProvider,
        timeout: float = 30.0,
        max_output_bytes: int = 10 * 1024 * 1024,
    ) -> None:
        self.binary_provider = binary_provider
        self.timeout = timeout
        self.max_output_bytes = max_output_bytes

    def execute(self, args: list[str], cwd: Path | str | None = None) -> ExecutionResult:
        """Run oxlint with args in cwd.

        A non-zero exit code alone is not an error: oxlint exits 1 when it
        reports diagnostics.

        Raises:
            OxlintExecutionError: If the binary is missing, the run times out,
                output exceeds max_output_bytes, or oxlint fails with only
                stderr output
        """
        try:
            argv = self.binary_provider.build_exec_args(args)
        except BinaryNotFoundError as e:
            raise OxlintExecutionError(str(e)) from e

        logger.debug("Running {} in {}", argv, cwd)

        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise OxlintExecutionError(
                f"oxlint timed out after {self.timeout}s", timeout=self.timeout
            ) from e
        except OSError as e:
            raise OxlintExecutionError(f"Failed to start oxlint: {e}") from e

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""

        if len(stdout.encode("utf-8")) > self.max_output_bytes:
            raise OxlintExecutionError(
                f"oxlint output exceeds {self.max_output_bytes} bytes",
                returncode=completed.returncode,
            )

        if completed.returncode != 0 and stderr and not stdout:
            raise OxlintExecutionError(
                f"Oxlint exited with code {completed.returncode}\nStderr: {stderr}",
                returncode=completed.returncode,
            )

        return ExecutionResult(stdout=stdout, stderr=stderr, returncode=completed.returncode)
