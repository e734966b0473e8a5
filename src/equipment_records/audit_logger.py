"""Structured audit logger for equipment record events.

Wraps Python's :mod:`logging` module so that every write and lookup made
against a record store can be emitted as a single JSON line:

    append → sequence assigned → record stored → due check

Usage::

    from equipment_records.audit_logger import get_audit_logger

    logger = get_audit_logger()
    logger.log_event("record_appended", log="calibration", device_id=1, sequence=1)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_LOGGER_NAME = "equipment_records.audit"


class _JsonFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = getattr(record, "_structured", None)
        if extra:
            payload.update(extra)
        return json.dumps(payload, default=str)


def get_audit_logger(name: str = _LOGGER_NAME) -> "AuditLogger":
    """Return an :class:`AuditLogger` bound to the logger *name*."""
    return AuditLogger(name)


class AuditLogger:
    """Structured logger for record-store audit events.

    Parameters
    ----------
    name : str
        Logger name (passed to :func:`logging.getLogger`).
    enabled : bool
        When *False*, :meth:`log_event` builds and returns the payload but
        emits nothing.
    """

    def __init__(self, name: str = _LOGGER_NAME, enabled: bool = True) -> None:
        self._logger = logging.getLogger(name)
        self._enabled = enabled
        # Attach JSON handler only once per logger name.
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_JsonFormatter())
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log_event(
        self,
        event: str,
        *,
        correlation_id: Optional[str] = None,
        level: int = logging.INFO,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Emit a structured audit log entry and return the payload dict.

        Parameters
        ----------
        event : str
            Short event name (e.g. ``"record_appended"``).
        correlation_id : str, optional
            Trace identifier supplied by the hosting layer.
        level : int
            Python logging level (default ``INFO``).
        **fields
            Arbitrary key-value pairs included in the JSON payload.
        """
        structured: Dict[str, Any] = {"event": event}
        if correlation_id is not None:
            structured["correlation_id"] = correlation_id
        structured.update(fields)

        if not self._enabled or not self._logger.isEnabledFor(level):
            return structured

        record = self._logger.makeRecord(
            self._logger.name,
            level,
            "(audit)",
            0,
            event,
            (),
            None,
        )
        record._structured = structured  # type: ignore[attr-defined]
        self._logger.handle(record)
        return structured
