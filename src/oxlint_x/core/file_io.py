"""File helpers for scratch files and fixed-source write-back.

- atomic_write: Write content via temp file + fsync + os.replace
- remove_file: Unlink a file, ignoring files that are already gone

Windows PermissionError (antivirus, indexers holding a handle) is retried
with exponential backoff via tenacity; other platforms call straight through.
"""

import os
import shutil
import sys
import tempfile
from collections.abc import Callable
from typing import TypeVar

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

T = TypeVar("T")


def _call_with_retry(func: Callable[[], T]) -> T:
    """Call func, retrying PermissionError on Windows.

    Retries up to 3 attempts with exponential backoff (0.05s, 0.1s, 0.2s).
    """
    if sys.platform == 'win32':
        @retry(
            retry=retry_if_exception_type(PermissionError),
            stop=stop_after_attempt(3),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=0.2),
            reraise=True
        )
        def _call_windows() -> T:
            return func()

        return _call_windows()
    return func()


def remove_file(path: str) -> bool:
    """Remove a file.

    Returns:
        True if the file was removed, False if it did not exist

    Raises:
        OSError: If removal fails for a reason other than a missing file
    """
    try:
        _call_with_retry(lambda: os.unlink(path))
    except FileNotFoundError:
        return False
    return True


def atomic_write(target_path: str, content: bytes) -> None:
    """Write content to file atomically.

    Args:
        target_path: Destination file path
        content: Raw bytes content to write

    Raises:
        OSError: If write fails
        PermissionError: If file cannot be written (after retries)

    Implementation:
        1. Create temp file in same directory as target (same filesystem)
        2. Write content and fsync
        3. Close the descriptor (required before os.replace on Windows)
        4. Copy the existing target's permission bits onto the temp file
        5. Replace target with temp file (with retry on Windows)
        6. On any failure: remove temp file and re-raise
    """
    target_dir = os.path.dirname(target_path) or '.'
    fd = None
    tmp_path = None

    try:
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix='.tmp_')
        os.write(fd, content)
        os.fsync(fd)

        # MUST close before os.replace on Windows
        os.close(fd)
        fd = None

        # mkstemp creates 0600 files; keep the mode of the file being replaced
        if os.path.exists(target_path):
            shutil.copymode(target_path, tmp_path)

        _call_with_retry(lambda: os.replace(tmp_path, target_path))

    except Exception:
        if fd is not None:
            try:
                os.close(fd)
            except OSError:
                pass

        if tmp_path is not None and os.path.exists(tmp_path):
            try:
                os.unlink(tmp_path)
            except OSError:
                pass

        raise
