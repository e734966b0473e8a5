"""CalibrationLog: calibration history per device, plus due-date checks."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..audit_logger import AuditLogger
from ..models import DeviceId, StoreConfig
from ..store import RecordStore
from .models import CalibrationRecord


class DueDateChecker:
    """Decide whether a device's calibration is due.

    A device with no recorded calibration is always due.  Otherwise it is
    due from its latest record's ``next_due_date`` onwards (inclusive).
    """

    def __init__(self, store: RecordStore[CalibrationRecord]) -> None:
        self._store = store
        self._log = AuditLogger(enabled=store.config.audit_logging)

    def is_due(self, device_id: DeviceId, as_of: int) -> bool:
        latest = self._store.latest(device_id)
        if latest is None:
            due, reason = True, "never_calibrated"
        else:
            due = as_of >= latest.next_due_date
            reason = "past_due_date" if due else "within_interval"

        self._log.log_event(
            "calibration_due_check",
            level=logging.DEBUG,
            log=self._store.name,
            device_id=device_id,
            as_of=as_of,
            due=due,
            reason=reason,
        )
        return due


class CalibrationLog:
    """Append-only calibration history keyed by device.

    Parameters
    ----------
    config : StoreConfig, optional
        Store configuration.  Defaults to a store named ``"calibration"``.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._store: RecordStore[CalibrationRecord] = RecordStore(
            "performed_by", config or StoreConfig(name="calibration")
        )
        self._checker = DueDateChecker(self._store)

    def record_calibration(
        self,
        caller: str,
        device_id: DeviceId,
        date: int,
        results: str,
        next_due_date: int,
        is_passed: bool,
    ) -> int:
        """Record a calibration performed by *caller*; return its sequence number."""
        record = CalibrationRecord(
            date=date,
            results=results,
            next_due_date=next_due_date,
            is_passed=is_passed,
        )
        return self._store.append(device_id, record, caller)

    def get_calibration(
        self, device_id: DeviceId, calibration_id: int
    ) -> Optional[CalibrationRecord]:
        return self._store.get(device_id, calibration_id)

    def get_latest_calibration(self, device_id: DeviceId) -> Optional[CalibrationRecord]:
        return self._store.latest(device_id)

    def get_calibration_count(self, device_id: DeviceId) -> int:
        return self._store.current_count(device_id)

    def is_calibration_due(self, device_id: DeviceId, as_of: int) -> bool:
        """Return *True* if *device_id* needs calibrating as of *as_of*."""
        return self._checker.is_due(device_id, as_of)

    def history(self, device_id: DeviceId) -> List[CalibrationRecord]:
        return self._store.history(device_id)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------

    @property
    def store(self) -> RecordStore[CalibrationRecord]:
        """Access the underlying record store."""
        return self._store

    @property
    def checker(self) -> DueDateChecker:
        return self._checker
