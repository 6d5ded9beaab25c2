"""Loguru logging setup for oxlint-x.

Usage:
    from oxlint_x.logging_setup import setup_logging, get_logger

    # At startup
    setup_logging("INFO")

    # In modules
    logger = get_logger(__name__)
    logger.info("Linting file", path="src/app.js")

Library modules log through ``from loguru import logger`` directly; nothing
is printed until an application (such as the CLI) calls setup_logging().
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

# Default console format with colors
CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Simple format without colors (for file output)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logging(
    log_level: str | None = None,
    log_file: Path | str | None = None,
    console: bool = True,
    serialize_file: bool = False,
) -> None:
    """Configure logging with console and optional file handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to WARNING so lint output is not drowned in log lines.
        log_file: Optional file for log output, rotated at 10 MB.
        console: Enable console (stderr) output.
        serialize_file: Use JSON format for file logs.

    Example:
        >>> setup_logging()  # Warnings and errors on stderr
        >>> setup_logging(log_level="DEBUG", log_file="oxlint-x.log")
    """
    logger.remove()

    if log_level is None:
        log_level = "WARNING"

    if console:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level=log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="7 days",
            serialize=serialize_file,
            backtrace=True,
            diagnose=False,
        )


def get_logger(name: str, **context: Any) -> "logger":
    """Get a context-bound logger.

    Args:
        name: Logger name (usually __name__)
        **context: Additional context to bind to all log messages

    Returns:
        Logger instance with bound context
    """
    return logger.bind(name=name, **context)
