"""Log severity levels.

Maps the five chainlog severities onto stdlib ``logging`` level numbers.
``logging`` has no TRACE level, so one is registered below DEBUG.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Union

from chainlog.errors import ConfigurationError

__all__ = ["TRACE", "Level"]

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """Severity of a log record, ordered by increasing urgency.

    Values are the stdlib ``logging`` level numbers, so a member can be
    passed anywhere ``logging`` expects a level.

    Example:
        >>> Level.parse("warning")
        <Level.WARN: 30>
        >>> Level.TRACE < Level.ERROR
        True
    """

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def levelno(self) -> int:
        """The stdlib ``logging`` level number."""
        return int(self.value)

    @classmethod
    def parse(cls, value: Union["Level", str, int]) -> "Level":
        """Convert a name or stdlib level number to a Level.

        Args:
            value: A Level, a case-insensitive name ("info", "WARN",
                "warning") or a stdlib level number matching a member

        Returns:
            The matching Level

        Raises:
            ConfigurationError: If the value names no level
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            name = value.strip().upper()
            if name in _ALIASES:
                return _ALIASES[name]
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        valid = ", ".join(member.name.lower() for member in cls)
        raise ConfigurationError(
            f"Invalid log level {value!r}",
            field="level",
            suggestion=f"Use one of: {valid}",
        )


_ALIASES = {member.name: member for member in Level}
_ALIASES["WARNING"] = Level.WARN
