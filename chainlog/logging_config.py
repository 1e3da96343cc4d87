"""Console and file output for applications using chainlog.

Importing chainlog installs no handlers. Applications that have no logging
setup of their own can call ``setup_logging`` to see the records their log
services emit, TRACE included.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from chainlog.errors import ConfigurationError
from chainlog.levels import Level

logger = logging.getLogger(__name__)

__all__ = [
    "FORMATS",
    "JSONFormatter",
    "get_log_level_from_env",
    "setup_logging",
]

FORMATS = {
    "human": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    "simple": "%(levelname)s: %(message)s",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger and message."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
                .isoformat()
                .replace("+00:00", "Z"),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
        )


def get_log_level_from_env(default: Level = Level.INFO) -> Level:
    """Read the level from CHAINLOG_LOG_LEVEL, falling back to LOG_LEVEL.

    Unknown names are reported with a warning and replaced by ``default``.
    """
    name = os.environ.get("CHAINLOG_LOG_LEVEL") or os.environ.get("LOG_LEVEL")
    if not name:
        return default
    try:
        return Level.parse(name)
    except ConfigurationError:
        logger.warning("Unknown log level %r in environment, using %s", name, default.name)
        return default


def setup_logging(
    level: Union[Level, str, int, None] = None,
    format_type: str = "human",
    log_file: Optional[Path] = None,
) -> None:
    """Send records to stdout, and optionally a file, through the root logger.

    Args:
        level: Anything ``Level.parse`` accepts; defaults to the environment
            (CHAINLOG_LOG_LEVEL, then LOG_LEVEL, then INFO)
        format_type: 'human', 'simple' or 'json'
        log_file: Optional path to also write records to

    Raises:
        ConfigurationError: If the level or format is unknown

    Example:
        >>> setup_logging("trace", format_type="json")
    """
    resolved = get_log_level_from_env() if level is None else Level.parse(level)

    formatter: logging.Formatter
    if format_type == "json":
        formatter = JSONFormatter()
    elif format_type in FORMATS:
        formatter = logging.Formatter(FORMATS[format_type], datefmt="%Y-%m-%d %H:%M:%S")
    else:
        raise ConfigurationError(
            f"Invalid log format {format_type!r}",
            field="format_type",
            suggestion="Use one of: human, simple, json",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved.levelno)

    # Replaced handlers are closed so their files are released
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
