"""Cross-platform discovery of the oxlint executable.

Prefers the project-local install (node_modules/.bin) so the version pinned
by the project is the one that runs, then falls back to PATH.
"""

import os
import shutil
import sys
from pathlib import Path

from loguru import logger


class BinaryNotFoundError(RuntimeError):
    """Raised when no oxlint binary can be located."""


class BinaryProvider:
    """Locates and caches the path of the oxlint binary."""

    def __init__(self, explicit_path: str | None = None, search_root: Path | str | None = None) -> None:
        self._explicit_path = explicit_path
        self._search_root = Path(search_root) if search_root is not None else None
        self._binary_path: str | None = None

    @property
    def binary_path(self) -> str:
        """Return cached binary path, detecting on first access."""
        if self._binary_path is None:
            self._binary_path = self._detect_binary()
            logger.debug("Using oxlint binary at {}", self._binary_path)
        return self._binary_path

    def _local_candidates(self) -> list[Path]:
        root = self._search_root or Path.cwd()
        bin_dir = root / "node_modules" / ".bin"
        if sys.platform == "win32":
            return [bin_dir / "oxlint.cmd", bin_dir / "oxlint.exe", bin_dir / "oxlint"]
        return [bin_dir / "oxlint"]

    def _detect_binary(self) -> str:
        # 1. Explicit path from settings
        if self._explicit_path:
            if os.path.isfile(self._explicit_path):
                return self._explicit_path
            raise BinaryNotFoundError(f"Configured oxlint binary does not exist: {self._explicit_path}")

        # 2. Project-local install
        for candidate in self._local_candidates():
            if candidate.is_file():
                return str(candidate)

        # 3. oxlint on PATH
        on_path = shutil.which("oxlint")
        if on_path:
            return on_path

        raise BinaryNotFoundError(
            "oxlint not found. Install it with 'npm install --save-dev oxlint' "
            "or set OXLINT_X_RUNNER__BINARY_PATH."
        )

    def build_exec_args(self, args: list[str]) -> list[str]:
        """Return the full argv: [binary_path, *args]."""
        return [self.binary_path, *args]
