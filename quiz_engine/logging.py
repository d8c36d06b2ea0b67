from __future__ import annotations

import copy
import logging
import os
import sys
from typing import IO, Optional

# Scoring traces sit between DEBUG and INFO
THINKING_LEVEL = logging.DEBUG + 5
logging.addLevelName(THINKING_LEVEL, "THINKING")
setattr(logging, "THINKING", THINKING_LEVEL)


def _thinking(self, msg, *args, **kwargs):
    if self.isEnabledFor(THINKING_LEVEL):
        self._log(THINKING_LEVEL, msg, args, **kwargs)


setattr(logging.Logger, "thinking", _thinking)

BASE_LOGGER_NAME = "quiz_engine"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ColorFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        THINKING_LEVEL: "\x1b[38;5;208m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, use_color: bool = True):
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if color:
            # other handlers must still see the plain levelname
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _resolve_level(level_name: Optional[str]) -> int:
    raw = (level_name or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def _stream_is_tty(stream) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def configure_logging(
    level_name: Optional[str] = None,
    *,
    stream: Optional[IO[str]] = None,
    use_color: Optional[bool] = None,
) -> logging.Logger:
    """Attach the console handler to the package logger.

    Library code only calls `get_logger`; applications (the Flask app, a
    script) call this once. Calling it again swaps the handler instead of
    stacking a second one.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(_resolve_level(level_name))

    stream = stream or sys.stdout
    if use_color is None:
        use_color = os.getenv("LOG_NO_COLOR") != "1" and _stream_is_tty(stream)

    for h in list(base.handlers):
        if getattr(h, "_quiz_engine_console", False):
            base.removeHandler(h)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColorFormatter(use_color=use_color))
    handler._quiz_engine_console = True  # type: ignore[attr-defined]
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None, *, level_name: str | None = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if level_name:
        base.setLevel(_resolve_level(level_name))
    return base.getChild(name) if name else base


_base = logging.getLogger(BASE_LOGGER_NAME)
_base.setLevel(_resolve_level(None))
_base.addHandler(logging.NullHandler())

logger = get_logger()
