"""Discovery and loading of .oxlintrc.json files.

The nearest config file above the linted file is merged over the inline
options passed by the caller; the file config takes priority. A config file
that cannot be read or parsed is logged and treated as absent.
"""

import json
from pathlib import Path
from typing import Any, NamedTuple

from loguru import logger

from oxlint_x.config import DEFAULT_CONFIG_FILE_NAME
from oxlint_x.core.config_merge import merge_configs


class ResolvedConfig(NamedTuple):
    """Merged configuration and the file it was read from, if any."""

    config: dict[str, Any]
    source_path: Path | None


def find_config_file(start_path: Path | str, file_name: str = DEFAULT_CONFIG_FILE_NAME) -> Path | None:
    """Find the nearest config file by walking up from start_path's directory.

    Every call performs a fresh traversal (no caching), so config files
    created or removed between runs are picked up.

    Args:
        start_path: Path of the file being linted
        file_name: Config file name to look for

    Returns:
        Path to the config file, or None if the filesystem root is reached
    """
    current = Path(start_path).absolute().parent

    while True:
        candidate = current / file_name
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config_file(path: Path | str) -> dict[str, Any] | None:
    """Load a JSON config file.

    Returns:
        Parsed config object, or None if the file is unreadable, not valid
        JSON, or not a JSON object
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Invalid config file {}: {}", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Invalid config file {}: top-level value must be an object", path)
        return None
    return data


def resolve_config(
    file_path: Path | str,
    options: dict[str, Any] | None = None,
    file_name: str = DEFAULT_CONFIG_FILE_NAME,
) -> ResolvedConfig:
    """Merge inline options with the nearest config file.

    Args:
        file_path: Path of the file being linted
        options: Inline options (lower priority)
        file_name: Config file name to look for

    Returns:
        ResolvedConfig with the merged tree and the discovered file path
    """
    source_path = find_config_file(file_path, file_name)
    file_config = load_config_file(source_path) if source_path is not None else None

    if source_path is not None:
        logger.debug("Resolved {} for {}", source_path, file_path)

    return ResolvedConfig(config=merge_configs(options, file_config), source_path=source_path)
