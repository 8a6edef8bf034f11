# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import sys
from enum import Enum
from functools import total_ordering
from typing import TextIO

# Finer than DEBUG, for per-entry classpath assembly decisions.
TRACE = 5

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@total_ordering
class LogLevel(Enum):
    """The `logging` module's levels, plus TRACE, as named on the command line and in config.

    Ordering follows verbosity: TRACE < DEBUG < INFO < WARN < ERROR.
    """

    TRACE = ("trace", TRACE)
    DEBUG = ("debug", logging.DEBUG)
    INFO = ("info", logging.INFO)
    WARN = ("warn", logging.WARN)
    ERROR = ("error", logging.ERROR)

    _level: int

    def __new__(cls, value: str, level: int) -> LogLevel:
        member: LogLevel = object.__new__(cls)
        member._value_ = value
        member._level = level
        return member

    @property
    def level(self) -> int:
        return self._level

    @classmethod
    def from_option(cls, text: str) -> LogLevel:
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown log level {text!r}, expected one of {valid}")

    def log(self, logger: logging.Logger, *args, **kwargs) -> None:
        logger.log(self._level, *args, **kwargs)

    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self._level < other._level


def configure_logging(level: LogLevel, stream: TextIO | None = None) -> logging.Handler:
    """Route `j2clbuild` loggers to `stream` (stderr by default) at `level`.

    Calling again replaces the previously installed handler rather than adding another.
    """
    logging.addLevelName(TRACE, "TRACE")
    logger = logging.getLogger("j2clbuild")
    for handler in list(logger.handlers):
        if getattr(handler, "_j2clbuild_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(handler, "_j2clbuild_handler", True)
    logger.addHandler(handler)
    logger.setLevel(level.level)
    return handler
