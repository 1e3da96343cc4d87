"""Passthrough log services.

Each service logs the value flowing through a chain and returns it
unchanged. They differ in how the value is rendered and in how ``None`` is
treated:

* ``LogDebugService`` logs ``repr(value)``
* ``LogDisplayService`` logs ``str(value)``
* ``LogOptionalDebugService`` logs ``repr(value)``, skipping ``None``
* ``LogOptionalDisplayService`` logs ``str(value)``, skipping ``None``

The optional variants are meant for chains that poll in a tight loop and
mostly see ``None``.

Example:
    from chainlog import LogDisplayService

    tap = LogDisplayService.info("my event: ")
    tap.process("hello world!")  # logs "my event: hello world!" at INFO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional, Type, TypeVar, Union

from chainlog.levels import Level
from chainlog.service import Service

__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LogDebugService",
    "LogDisplayService",
    "LogOptionalDebugService",
    "LogOptionalDisplayService",
]

DEFAULT_LOGGER_NAME = "chainlog"

T = TypeVar("T")
S = TypeVar("S", bound="_LogService")


@dataclass(frozen=True)
class _LogService(Service[Any, Any]):
    """Logs ``prefix + render(input)`` at ``level`` and returns ``input``.

    Subclasses pick the rendering function and whether ``None`` is skipped.

    Args:
        level: Severity of emitted records (a Level, or a name/number that
            ``Level.parse`` accepts)
        prefix: Text prepended to every message
        logger_name: Name of the stdlib logger records are sent to
    """

    level: Level
    prefix: str = ""
    logger_name: str = DEFAULT_LOGGER_NAME
    _logger: logging.Logger = field(init=False, repr=False, compare=False)

    _render: ClassVar[Callable[[Any], str]] = staticmethod(repr)
    _skip_none: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", Level.parse(self.level))
        object.__setattr__(self, "_logger", logging.getLogger(self.logger_name))

    @classmethod
    def new(cls: Type[S], level: Union[Level, str, int], prefix: str = "") -> S:
        """Log at the given level."""
        return cls(Level.parse(level), prefix)

    @classmethod
    def trace(cls: Type[S], prefix: str = "") -> S:
        """Log as Level.TRACE."""
        return cls.new(Level.TRACE, prefix)

    @classmethod
    def debug(cls: Type[S], prefix: str = "") -> S:
        """Log as Level.DEBUG."""
        return cls.new(Level.DEBUG, prefix)

    @classmethod
    def info(cls: Type[S], prefix: str = "") -> S:
        """Log as Level.INFO."""
        return cls.new(Level.INFO, prefix)

    @classmethod
    def warn(cls: Type[S], prefix: str = "") -> S:
        """Log as Level.WARN."""
        return cls.new(Level.WARN, prefix)

    warning = warn

    @classmethod
    def error(cls: Type[S], prefix: str = "") -> S:
        """Log as Level.ERROR."""
        return cls.new(Level.ERROR, prefix)

    def process(self, input: Any) -> Any:
        """Log ``input`` and return it unchanged.

        Never raises. Handler failures are dealt with by ``logging`` itself.
        """
        if input is None and self._skip_none:
            return None
        # Rendering can be costly; skip it when the record would be dropped.
        if self._logger.isEnabledFor(self.level.levelno):
            self._logger.log(self.level.levelno, f"{self.prefix}{self._render(input)}")
        return input


class LogDebugService(_LogService):
    """Logs ``repr(input)`` at a configured level, returning the input."""

    def process(self, input: T) -> T:
        return super().process(input)


class LogDisplayService(_LogService):
    """Logs ``str(input)`` at a configured level, returning the input."""

    _render = staticmethod(str)

    def process(self, input: T) -> T:
        return super().process(input)


class LogOptionalDebugService(_LogService):
    """Logs ``repr(input)`` unless it is None, returning the input."""

    _skip_none = True

    def process(self, input: Optional[T]) -> Optional[T]:
        return super().process(input)


class LogOptionalDisplayService(_LogService):
    """Logs ``str(input)`` unless it is None, returning the input."""

    _render = staticmethod(str)
    _skip_none = True

    def process(self, input: Optional[T]) -> Optional[T]:
        return super().process(input)
