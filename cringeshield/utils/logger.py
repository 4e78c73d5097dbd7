from __future__ import annotations

import copy
import logging
import os
import sys
import time
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")
USER_ID: ContextVar[str] = ContextVar("user_id", default="-")

LOGGER_NAME = "cringeshield"

LOG_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s "
    "request_id=%(request_id)s user_id=%(user_id)s src=%(filename)s:%(lineno)d "
    "%(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestContextFilter(logging.Filter):
    """Stamps every record with the current request id and authenticated user id."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003 (shadow built-in name)
        record.request_id = REQUEST_ID.get()
        record.user_id = USER_ID.get()
        return True


class ColorFormatter(logging.Formatter):
    """ANSI-colored level names for the console handler."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }

    def format(self, record: logging.LogRecord) -> str:
        r = copy.copy(record)
        color = self._LEVEL_COLORS.get(r.levelno)
        if color:
            r.levelname = f"{color}{r.levelname}{self._RESET}"
        return super().format(r)


def _console_wants_color(stream) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _parse_level(level: str) -> int:
    return logging.getLevelNamesMapping().get((level or "INFO").upper(), logging.INFO)


def configure_logging(
    *,
    log_dir: str | Path | None = None,
    log_file: str = "cringeshield.log",
    level: str = "INFO",
) -> logging.Logger:
    """
    Configure the application logger: a rotating file under ``log_dir``
    (``LOG_DIR``, default ``logs``) and, with LOG_CONSOLE=1, stdout.
    Idempotent: later calls return the already configured logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, "_configured", False):
        return logger

    numeric_level = _parse_level(os.getenv("LOG_LEVEL", level))
    logger.setLevel(numeric_level)
    logger.propagate = False

    directory = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    directory.mkdir(parents=True, exist_ok=True)
    context_filter = RequestContextFilter()

    fh = RotatingFileHandler(
        filename=str(directory / log_file),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    fh.setLevel(numeric_level)
    fh.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    fh.addFilter(context_filter)
    logger.addHandler(fh)

    if os.getenv("LOG_CONSOLE", "").lower() in ("1", "true", "yes"):
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(numeric_level)
        formatter_cls = ColorFormatter if _console_wants_color(sys.stdout) else logging.Formatter
        ch.setFormatter(formatter_cls(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        ch.addFilter(context_filter)
        logger.addHandler(ch)

    logger._configured = True  # type: ignore[attr-defined]
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger; handlers come from configure_logging()."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_request_id(request_id: Optional[str] = None) -> str:
    rid = request_id or uuid.uuid4().hex
    REQUEST_ID.set(rid)
    return rid


def set_user_id(user_id: object) -> None:
    USER_ID.set(str(user_id))


def clear_request_id() -> None:
    REQUEST_ID.set("-")
    USER_ID.set("-")


class log_request:
    """
    Times a block and logs the outcome:
      with log_request(logger, "seed speaking prompts"):
          ...
    """

    def __init__(self, logger: logging.Logger, name: str):
        self.logger = logger
        self.name = name
        self.start = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        self.logger.debug("start %s", self.name)
        return self

    def __exit__(self, exc_type, exc, tb):
        dur_ms = int((time.perf_counter() - self.start) * 1000)
        if exc is None:
            self.logger.info("%s ok duration_ms=%s", self.name, dur_ms)
        else:
            self.logger.exception("%s failed duration_ms=%s", self.name, dur_ms)
        return False
