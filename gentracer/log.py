"""Application logger writing to the terminal and a log file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

TRACE = 5
LOGGER_NAME = "gentracer"
DEFAULT_LOGFILE = "logs/log.txt"

logging.addLevelName(TRACE, "TRACE")

_PATTERN = "[%(asctime)s.%(msecs)03d] [%(name)s] [%(levelname)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        copy = logging.makeLogRecord(record.__dict__)
        copy.levelname = copy.levelname.lower()
        return super().format(copy)


class _TerminalHandler(logging.StreamHandler):
    """Writes to the controlling terminal, or stderr when there is none."""

    def __init__(self) -> None:
        self._owned: TextIO | None
        try:
            self._owned = open("/dev/tty", "w", encoding="utf-8")
        except OSError:
            self._owned = None
        super().__init__(self._owned if self._owned is not None else sys.stderr)

    def close(self) -> None:
        try:
            if self._owned is not None:
                self._owned.close()
                self._owned = None
        finally:
            super().close()


def init_logger(logfile: str | Path = DEFAULT_LOGFILE) -> logging.Logger:
    """Configure the application logger once; later calls leave it as it is."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    path = Path(logfile)
    path.parent.mkdir(parents=True, exist_ok=True)

    formatter = _Formatter(_PATTERN, _DATE_FORMAT)
    handlers: list[logging.Handler] = [
        _TerminalHandler(),
        logging.FileHandler(path, mode="w", encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """The application logger."""
    return logging.getLogger(LOGGER_NAME)


def _format_component(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_vec3(v: Any) -> str:
    """Render a vector as ``(x, y, z)``."""
    return "({}, {}, {})".format(
        _format_component(v.x), _format_component(v.y), _format_component(v.z)
    )