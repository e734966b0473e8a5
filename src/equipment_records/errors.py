"""Exceptions raised by the record stores.

Missing records are not errors: lookups return ``None``.
"""

from __future__ import annotations

from typing import Union


class RecordStoreError(Exception):
    """Base error for record store operations."""


class SequenceOverflowError(RecordStoreError):
    """A device's sequence counter would exceed the configured limit."""

    def __init__(self, device_id: Union[int, str], limit: int) -> None:
        self.device_id = device_id
        self.limit = limit
        super().__init__(
            f"Sequence for device {device_id!r} would exceed limit {limit}."
        )
