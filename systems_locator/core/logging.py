"""Structured logging helpers tagging records with the active locator name."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from systems_locator.core.config import settings

_locator_name: ContextVar[Optional[str]] = ContextVar("locator_name", default=None)

LEVEL_NAME = str(getattr(settings, "LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)
LOG_SCHEMA_VERSION = str(getattr(settings, "LOG_SCHEMA_VERSION", "1.0.0"))
LOG_FILE_NAME = "systems_locator.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _resolve_log_file() -> Optional[Path]:
    """Return the rotating log file path, or ``None`` when file logging is off."""

    configured_dir = getattr(settings, "LOG_DIR", None)
    if not configured_dir:
        return None

    log_dir = Path(configured_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        return None
    return log_dir / LOG_FILE_NAME


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class LocatorNameFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach the name of the locator currently doing work to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.locator = get_locator_name() or "-"
        return True


def bind_locator_name(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the locator name context variable."""

    return _locator_name.set(value)


def reset_locator_name(token: Token[Optional[str]]) -> None:
    """Reset the locator name context variable to a previous state."""

    _locator_name.reset(token)


def get_locator_name() -> Optional[str]:
    """Return the current locator name if bound."""

    return _locator_name.get()


@contextmanager
def locator_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a locator name."""

    token = bind_locator_name(value)
    try:
        yield
    finally:
        reset_locator_name(token)


def _ensure_handlers(logger: logging.Logger) -> None:
    if logger.handlers:
        return

    formatter = VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(locator)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )
    locator_filter = LocatorNameFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(locator_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = _resolve_log_file()
    if log_file is None:
        return

    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(locator_filter)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with locator name filtering."""

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    _ensure_handlers(logger)
    return logger


__all__ = [
    "LocatorNameFilter",
    "VersionedJsonFormatter",
    "bind_locator_name",
    "reset_locator_name",
    "get_locator_name",
    "locator_context",
    "get_logger",
    "LOG_SCHEMA_VERSION",
]
