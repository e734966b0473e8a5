"""UsageLog: per-device history of clinical equipment usage."""

from __future__ import annotations

from typing import List, Optional

from ..models import DeviceId, StoreConfig
from ..store import RecordStore
from .models import UsageRecord


class UsageLog:
    """Append-only usage history keyed by device.

    Parameters
    ----------
    config : StoreConfig, optional
        Store configuration.  Defaults to a store named ``"usage"``.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._store: RecordStore[UsageRecord] = RecordStore(
            "user", config or StoreConfig(name="usage")
        )

    def log_usage(
        self,
        caller: str,
        device_id: DeviceId,
        start_time: int,
        end_time: int,
        purpose: str,
        patient_id: str,
        notes: str,
    ) -> int:
        """Log a usage session by *caller*; return its sequence number."""
        record = UsageRecord(
            start_time=start_time,
            end_time=end_time,
            purpose=purpose,
            patient_id=patient_id,
            notes=notes,
        )
        return self._store.append(device_id, record, caller)

    def get_usage_log(self, device_id: DeviceId, log_id: int) -> Optional[UsageRecord]:
        return self._store.get(device_id, log_id)

    def get_usage_count(self, device_id: DeviceId) -> int:
        return self._store.current_count(device_id)

    def get_latest_usage(self, device_id: DeviceId) -> Optional[UsageRecord]:
        return self._store.latest(device_id)

    def history(self, device_id: DeviceId) -> List[UsageRecord]:
        return self._store.history(device_id)

    @property
    def store(self) -> RecordStore[UsageRecord]:
        """Access the underlying record store."""
        return self._store
