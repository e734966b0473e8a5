"""Data models for equipment calibration records."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CalibrationRecord:
    """One calibration performed on a device.

    Parameters
    ----------
    date : int
        When the calibration was performed (epoch seconds).
    results : str
        Free-text results reported by the technician.
    next_due_date : int
        When the next calibration falls due (epoch seconds).
    is_passed : bool
        Whether the device passed calibration.
    performed_by : str
        Caller identity of the technician; set by the store on append.
    """

    date: int
    results: str
    next_due_date: int
    is_passed: bool
    performed_by: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "performedBy": self.performed_by,
            "results": self.results,
            "nextDueDate": self.next_due_date,
            "isPassed": self.is_passed,
        }
