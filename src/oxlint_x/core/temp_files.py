"""Scratch file registry for handing source and config to oxlint.

oxlint only reads from disk, so every lint or format call writes the source
text (and, when non-empty, the merged config) to randomly named files in a
project-local scratch directory. The registry tracks every file it creates
so that files left behind by an interrupted run are removed at interpreter
exit.
"""

import atexit
import json
import secrets
import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from loguru import logger

from oxlint_x.config import TEMP_DIR_NAME
from oxlint_x.core.file_io import remove_file


_live_registries: "weakref.WeakSet[TempFileRegistry]" = weakref.WeakSet()


@atexit.register
def _cleanup_live_registries() -> None:
    for registry in list(_live_registries):
        registry.cleanup_all()


class TempFileRegistry:
    """Creates and tracks scratch files in one directory."""

    def __init__(self, directory: Path | str, default_extension: str = "js") -> None:
        self.directory = Path(directory)
        self.default_extension = default_extension
        self._files: set[Path] = set()
        self._lock = threading.Lock()
        _live_registries.add(self)

    @property
    def tracked(self) -> frozenset[Path]:
        with self._lock:
            return frozenset(self._files)

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def _new_path(self, kind: str, extension: str) -> Path:
        name = f"{TEMP_DIR_NAME}-{kind}-{secrets.token_hex(16)}.{extension}"
        return self.directory / name

    def _write(self, path: Path, content: str) -> Path:
        self.ensure_directory()
        # newline="" keeps \r\n and \r exactly as given
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        with self._lock:
            self._files.add(path)
        logger.trace("Created scratch file {}", path)
        return path

    def extension_for(self, original_path: Path | str | None) -> str:
        """Extension to use for a scratch copy of original_path."""
        if original_path:
            suffix = Path(original_path).suffix
            if suffix:
                return suffix[1:]
        return self.default_extension

    def create_source_file(self, content: str, original_path: Path | str | None = None) -> Path:
        """Write source text to a scratch file with the original's extension."""
        return self._write(self._new_path("lint", self.extension_for(original_path)), content)

    def create_config_file(self, config: dict[str, Any]) -> Path:
        """Write a config object to a scratch JSON file."""
        return self._write(self._new_path("config", "json"), json.dumps(config))

    def cleanup(self, path: Path) -> None:
        """Stop tracking path and remove it from disk."""
        with self._lock:
            self._files.discard(path)
        try:
            remove_file(str(path))
        except OSError as e:
            logger.warning("Failed to remove scratch file {}: {}", path, e)

    def cleanup_all(self) -> None:
        """Remove every tracked file."""
        with self._lock:
            files = list(self._files)
        for path in files:
            self.cleanup(path)

    @contextmanager
    def scratch_files(self) -> Iterator[list[Path]]:
        """Collect files created inside the block and remove them on exit.

        Usage:
            with registry.scratch_files() as created:
                created.append(registry.create_source_file(code, path))
        """
        created: list[Path] = []
        try:
            yield created
        finally:
            for path in created:
                self.cleanup(path)
