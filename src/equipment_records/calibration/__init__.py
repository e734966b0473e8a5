"""Calibration tracking: calibration history and due-date checks."""

from .log import CalibrationLog, DueDateChecker
from .models import CalibrationRecord

__all__ = ["CalibrationLog", "CalibrationRecord", "DueDateChecker"]
