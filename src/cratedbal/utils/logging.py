"""Structured logging helpers for cratedbal."""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Optional

LOG_LEVEL_ENV_VAR = "CRATEDBAL_LOG_LEVEL"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int | str | None = None) -> None:
    """
    Install the package handler once. Without an explicit level the
    ``CRATEDBAL_LOG_LEVEL`` environment variable is used, falling back to
    INFO when it is unset or unknown.
    """
    logger = logging.getLogger("cratedbal")
    if logger.handlers:
        return
    if level is None:
        level = _level_from_env()
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"cratedbal.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid
