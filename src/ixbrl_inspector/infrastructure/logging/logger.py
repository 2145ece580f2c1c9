# src/ixbrl_inspector/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce one JSON object per log line.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Enrichment with ``report_id`` via contextvars, so every line emitted
      while a document is being inspected names that document.
    * Fallback enrichment via record attributes or the ``REPORT_ID``
      environment variable.
    * ``extra={"extra": {...}}`` payloads are merged into the JSON object.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "set_report_context",
    "get_report_id",
    "JsonFormatter",
]

_REPORT_ID_ENV_KEY = "REPORT_ID"

# Per-invocation correlation context.
_REPORT_ID_CTX: ContextVar[str | None] = ContextVar("ixbrl_report_id", default=None)


def set_report_context(*, report_id: str | None = None) -> None:
    """Set the correlation identifier for the report being inspected.

    Args:
        report_id: Identifier of the report (typically its file name). A
            ``None`` value leaves the current identifier unchanged.
    """
    if report_id is not None:
        _REPORT_ID_CTX.set(report_id)


def get_report_id() -> str | None:
    """Return the current report id from contextvars, if any."""
    return _REPORT_ID_CTX.get(None)


class JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Report id: record attribute, then contextvar, then env.
        rid: str | None = (
            getattr(record, "report_id", None)
            or _REPORT_ID_CTX.get(None)
            or os.getenv(_REPORT_ID_ENV_KEY)
        )
        if rid:
            payload["report_id"] = rid

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)

    if any(isinstance(h.formatter, JsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
