"""Logging for the adjgraph command."""

import logging
from logging import Formatter, LogRecord, StreamHandler
import sys
from typing import NoReturn, TextIO

# ANSI color code per level name; FATAL and ERROR share red.
LEVEL_COLORS = {
    "FATAL": 31,
    "ERROR": 31,
    "WARNING": 33,
    "INFO": 32,
    "DEBUG": 35,
}


class LevelFormatter(Formatter):

    """Formats records as "LEVEL: message", optionally with a bold colored level."""

    def __init__(self, use_color: bool):
        super().__init__("%(levelname)s: %(message)s")
        self.use_color = use_color

    def format(self, record: LogRecord) -> str:
        text = super().format(record)
        code = LEVEL_COLORS.get(record.levelname)
        if not self.use_color or code is None:
            return text
        level, rest = text.split(":", 1)
        return f"\x1b[{code};1m{level}:\x1b[0m{rest}"


class ExitStreamHandler(StreamHandler):

    """Stream handler that calls sys.exit(1) once a record reaches exit_level."""

    def __init__(self, stream: TextIO, exit_level: int = logging.FATAL):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Send root logger output to stream, exiting at exit_level.

    Requires log_level <= exit_level <= FATAL. A handler installed by an
    earlier call is replaced.
    """
    assert log_level <= exit_level <= logging.FATAL
    root = logging.getLogger()
    for old in [h for h in root.handlers if isinstance(h, ExitStreamHandler)]:
        root.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(LevelFormatter(use_color=stream.isatty()))
    root.addHandler(handler)
    root.setLevel(log_level)
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL, which exits once setup_logging has run."""
    logging.fatal(msg, *args, **kwargs)
    assert False  # unreachable after setup_logging
