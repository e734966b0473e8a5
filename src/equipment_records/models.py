"""Shared data models for equipment record stores."""

from dataclasses import dataclass
from typing import Union

DeviceId = Union[int, str]

# Highest per-device sequence number (unsigned 128-bit).
MAX_SEQUENCE = 2**128 - 1


@dataclass(frozen=True)
class RecordKey:
    """Composite key addressing one record: ``(device_id, sequence)``."""

    device_id: DeviceId
    sequence: int


@dataclass
class StoreConfig:
    """Configuration knobs for a record store.

    Parameters
    ----------
    name : str
        Store name, included as ``log`` in every audit event.
    max_sequence : int
        Highest sequence number a single device may reach.  Appending
        beyond it raises :class:`~equipment_records.errors.SequenceOverflowError`.
    audit_logging : bool
        When *False*, the store emits no audit log lines.
    """

    name: str = "records"
    max_sequence: int = MAX_SEQUENCE
    audit_logging: bool = True

    def __post_init__(self) -> None:
        if self.max_sequence < 1:
            raise ValueError(f"max_sequence must be >= 1, got {self.max_sequence}")
