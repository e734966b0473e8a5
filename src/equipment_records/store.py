"""Append-only, per-device record store.

Records are addressed by :class:`~equipment_records.models.RecordKey`
``(device_id, sequence)``.  Sequence numbers come from a
:class:`~equipment_records.sequence.SequenceCounter` owned by the store, so
each device's history is numbered ``1..N`` with no gaps and no reuse.

The store is generic over its payload type.  Payloads must be dataclasses
carrying a field for the caller identity; :meth:`RecordStore.append` stamps
the caller into that field before the record is stored.  Stored records
are never updated or deleted.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

from .audit_logger import AuditLogger
from .errors import SequenceOverflowError
from .models import DeviceId, RecordKey, StoreConfig
from .sequence import SequenceCounter

P = TypeVar("P")


class RecordStore(Generic[P]):
    """Thread-safe, in-memory append-only record store.

    Parameters
    ----------
    caller_field : str
        Name of the payload field that receives the caller identity
        (e.g. ``"performed_by"`` or ``"user"``).
    config : StoreConfig, optional
        Store name, sequence limit and audit logging switch.
    """

    def __init__(self, caller_field: str, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._caller_field = caller_field
        self._counter = SequenceCounter(self._config.max_sequence)
        self._records: Dict[RecordKey, P] = {}
        # Guards the counter increment and payload write as one unit.
        self._lock = threading.Lock()
        self._log = AuditLogger(enabled=self._config.audit_logging)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def append(self, device_id: DeviceId, payload: P, caller_identity: str) -> int:
        """Store *payload* as the next record for *device_id*.

        The caller identity is written verbatim into the payload's caller
        field.  Returns the sequence number assigned to the record.

        Raises
        ------
        SequenceOverflowError
            If the device has reached the configured sequence limit.  The
            store is left unchanged.
        """
        record = dataclasses.replace(payload, **{self._caller_field: caller_identity})
        with self._lock:
            try:
                sequence = self._counter.next_sequence(device_id)
            except SequenceOverflowError as exc:
                self._log.log_event(
                    "sequence_overflow",
                    level=logging.ERROR,
                    log=self._config.name,
                    device_id=device_id,
                    limit=exc.limit,
                )
                raise
            self._records[RecordKey(device_id, sequence)] = record

        self._log.log_event(
            "record_appended",
            log=self._config.name,
            device_id=device_id,
            sequence=sequence,
            caller=caller_identity,
        )
        return sequence

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, device_id: DeviceId, sequence: int) -> Optional[P]:
        """Return the record at ``(device_id, sequence)``, or ``None``."""
        with self._lock:
            record = self._lookup(device_id, sequence)
        if record is None:
            self._log.log_event(
                "record_not_found",
                level=logging.DEBUG,
                log=self._config.name,
                device_id=device_id,
                sequence=sequence,
            )
        return record

    def latest(self, device_id: DeviceId) -> Optional[P]:
        """Return the most recent record for *device_id*, or ``None``."""
        with self._lock:
            count = self._counter.current_count(device_id)
            if count == 0:
                return None
            return self._lookup(device_id, count)

    def current_count(self, device_id: DeviceId) -> int:
        """Return how many records *device_id* has."""
        return self._counter.current_count(device_id)

    def history(self, device_id: DeviceId) -> List[P]:
        """Return every record for *device_id* in sequence order."""
        with self._lock:
            count = self._counter.current_count(device_id)
            return [self._records[RecordKey(device_id, n)] for n in range(1, count + 1)]

    def devices(self) -> List[DeviceId]:
        """Return every device with at least one record."""
        return self._counter.devices()

    def _lookup(self, device_id: DeviceId, sequence: int) -> Optional[P]:
        if sequence < 1 or sequence > self._counter.current_count(device_id):
            return None
        return self._records.get(RecordKey(device_id, sequence))

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> StoreConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._records)
