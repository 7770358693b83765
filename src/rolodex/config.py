"""Configuration utilities for ROLODEX.

This module centralizes the environment variables that tune the logging layer
and the helpers that parse them.
"""

import logging
import os
import re
from pathlib import Path

from platformdirs import user_log_dir

LOG_LEVEL_ENV = "ROLODEX_LOG_LEVEL"  # pragma: no mutate
LOG_PATH_ENV = "ROLODEX_LOG_PATH"  # pragma: no mutate
LOGGER_LEVELS_ENV = "ROLODEX_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FILENAME = "latest.log"


class InvalidLogLevelError(ValueError):
    """Raised when a log level name cannot be resolved.

    Attributes:
        value (str): The offending level name or NAME=LEVEL item.
    """

    def __init__(self, value: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid log level: {value}")
        self.value = value


def parse_level_name(name: str) -> int:
    """Convert a textual level name (case-insensitive) to its numeric value.

    Args:
        name: A standard logging level name such as "debug" or "WARNING".

    Returns:
        int: The numeric logging level.

    Raises:
        InvalidLogLevelError: If `name` is not a standard level name.
    """
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise InvalidLogLevelError(name)
    return level


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a string or a sequence of strings on commas and whitespace."""
    items: list[str] = []
    if isinstance(value, (tuple, list)):
        for v in value:
            items.extend([s for s in re.split(r"[,\s]+", v) if s])
    else:  # plain string
        items.extend([s for s in re.split(r"[,\s]+", value) if s])
    return items


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Items may be passed as one comma/space separated string (as read from the
    environment) or as a sequence of strings. Later items override earlier ones
    for the same logger name.

    Args:
        value: The raw NAME=LEVEL item(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLogLevelError: If an item is not NAME=LEVEL or LEVEL is invalid.
    """
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise InvalidLogLevelError(
                item, f"Expected NAME=LEVEL, got {item!r}"
            ) from e
        levels[name.strip()] = parse_level_name(level_str)
    return levels


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The level named by `ROLODEX_LOG_LEVEL`, or WARNING when it is unset.

    Raises:
        InvalidLogLevelError: If `ROLODEX_LOG_LEVEL` is not a level name.
    """
    if not (name := os.environ.get(LOG_LEVEL_ENV)):
        return DEFAULT_LOG_LEVEL
    return parse_level_name(name)


def get_log_path() -> Path:
    """Get the flight-recorder file path.

    Returns:
        The path in `ROLODEX_LOG_PATH`, or `latest.log` in the user log
        directory when it is unset.
    """
    if path := os.environ.get(LOG_PATH_ENV):
        return Path(path)
    return Path(user_log_dir("rolodex", appauthor=False)) / DEFAULT_LOG_FILENAME


def get_logger_levels() -> dict[str, int]:
    """Get per-logger level overrides from `ROLODEX_LOGGER_LEVELS`."""
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, ""))
