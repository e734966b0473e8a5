"""equipment-records: append-only calibration and usage histories per device."""

from .audit_logger import AuditLogger, get_audit_logger
from .calibration import CalibrationLog, CalibrationRecord, DueDateChecker
from .errors import RecordStoreError, SequenceOverflowError
from .models import MAX_SEQUENCE, RecordKey, StoreConfig
from .sequence import SequenceCounter
from .store import RecordStore
from .usage import UsageLog, UsageRecord

__version__ = "0.1.0"
__all__ = [
    "AuditLogger",
    "CalibrationLog",
    "CalibrationRecord",
    "DueDateChecker",
    "MAX_SEQUENCE",
    "RecordKey",
    "RecordStore",
    "RecordStoreError",
    "SequenceCounter",
    "SequenceOverflowError",
    "StoreConfig",
    "UsageLog",
    "UsageRecord",
    "get_audit_logger",
]
