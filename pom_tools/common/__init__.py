"""
================================================================================
POM Tools Common Utilities
================================================================================

Shared helpers for the UI automation framework: loguru setup, filesystem
helpers, timestamps and random test data.

Exports:
    - init_logger: Configure loguru with the framework's standard sinks
    - ensure_directory: Idempotent directory creation
    - get_timestamp: Filesystem-safe timestamp string
    - generate_random_string / generate_random_email: Test data helpers
    - wait_for: Async sleep in milliseconds
    - read_json_file / write_json_file: JSON file helpers

Usage:
    from pom_tools.common import init_logger, get_timestamp

    init_logger()
    name = f"report_{get_timestamp()}.json"

================================================================================
"""

import asyncio
import json
import random
import string
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger


# ============================================================
# Logging Setup
# ============================================================

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path to write logs to
        format_string: Log format string

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="reports/framework.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        format=format_string,
        level=level.upper(),
        colorize=True,
    )

    if log_file:
        ensure_directory(Path(log_file).parent)
        logger.add(
            log_file,
            format=format_string,
            level=level.upper(),
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Allow the next init_logger() call to reconfigure sinks."""
    global _logger_initialized
    _logger_initialized = False


# ============================================================
# Filesystem Helpers
# ============================================================

def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensures a directory exists, creating it if necessary.

    Concurrent callers are safe: an already existing directory is not an error.

    Args:
        path: Directory path

    Returns:
        The directory as an absolute Path
    """
    directory = Path(path).resolve()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_timestamp(now: Optional[datetime] = None) -> str:
    """
    Returns a filesystem-safe timestamp: YYYY-MM-DD_HH-MM-SS.

    Args:
        now: Moment to format (defaults to the current local time)
    """
    return (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")


def read_json_file(file_path: Union[str, Path]) -> Any:
    """
    Reads and parses a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Parsed JSON content
    """
    with open(Path(file_path).resolve(), "r", encoding="utf-8") as f:
        return json.load(f)


def write_json_file(file_path: Union[str, Path], data: Any) -> Path:
    """
    Writes data as pretty-printed JSON, creating parent directories.

    Args:
        file_path: Path to the JSON file
        data: JSON-serializable data

    Returns:
        Absolute path of the written file
    """
    full_path = Path(file_path).resolve()
    ensure_directory(full_path.parent)
    with open(full_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return full_path


# ============================================================
# Test Data Helpers
# ============================================================

_RANDOM_ALPHABET = string.ascii_letters + string.digits


def generate_random_string(length: int = 10) -> str:
    """Returns a random alphanumeric string of the given length."""
    return "".join(random.choice(_RANDOM_ALPHABET) for _ in range(length))


def generate_random_email() -> str:
    """Returns a throwaway address on example.com."""
    return f"test{generate_random_string(8)}@example.com"


async def wait_for(milliseconds: int) -> None:
    """Sleeps without blocking the event loop."""
    await asyncio.sleep(milliseconds / 1000)


# Export public API
__all__ = [
    "init_logger",
    "reset_logger",
    "ensure_directory",
    "get_timestamp",
    "read_json_file",
    "write_json_file",
    "generate_random_string",
    "generate_random_email",
    "wait_for",
]
