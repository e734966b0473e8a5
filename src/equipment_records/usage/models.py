"""Data models for equipment usage records."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class UsageRecord:
    """One session of a device being used on a patient."""

    start_time: int
    end_time: int
    purpose: str
    patient_id: str
    notes: str
    user: str = ""

    @property
    def duration_seconds(self) -> int:
        """Return session length in seconds."""
        return self.end_time - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "user": self.user,
            "purpose": self.purpose,
            "patientId": self.patient_id,
            "notes": self.notes,
        }
