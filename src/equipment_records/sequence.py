"""SequenceCounter: per-device record counts."""

from __future__ import annotations

import threading
from typing import Dict, List

from .errors import SequenceOverflowError
from .models import MAX_SEQUENCE, DeviceId


class SequenceCounter:
    """Tracks how many records have been appended for each device.

    A device that has never been seen has a count of ``0``; the first
    call to :meth:`next_sequence` for it returns ``1``.
    """

    def __init__(self, max_sequence: int = MAX_SEQUENCE) -> None:
        self._lock = threading.Lock()
        self._max_sequence = max_sequence
        self._counts: Dict[DeviceId, int] = {}

    def next_sequence(self, device_id: DeviceId) -> int:
        """Advance the count for *device_id* and return the new value."""
        with self._lock:
            count = self._counts.get(device_id, 0) + 1
            if count > self._max_sequence:
                raise SequenceOverflowError(device_id, self._max_sequence)
            self._counts[device_id] = count
            return count

    def current_count(self, device_id: DeviceId) -> int:
        """Return the count for *device_id* (``0`` if unseen)."""
        return self._counts.get(device_id, 0)

    def devices(self) -> List[DeviceId]:
        """Return every device with at least one record, in first-seen order."""
        with self._lock:
            return list(self._counts)

    @property
    def max_sequence(self) -> int:
        return self._max_sequence
