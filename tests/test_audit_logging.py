"""Unit tests for audit logging of store writes, lookups and due checks."""

import json
import logging

import pytest

from equipment_records.audit_logger import AuditLogger, get_audit_logger
from equipment_records.calibration import CalibrationLog
from equipment_records.errors import SequenceOverflowError
from equipment_records.models import StoreConfig
from equipment_records.usage import UsageLog

_AUDIT = "equipment_records.audit"


@pytest.fixture()
def audit_records(caplog):
    caplog.set_level(logging.DEBUG, logger=_AUDIT)

    def _events():
        return [r._structured for r in caplog.records if r.name == _AUDIT]

    return _events


# ---- AuditLogger ----------------------------------------------------------


def test_audit_logger_emits_json(capfd):
    """AuditLogger.log_event() emits a JSON line to stderr."""
    logger = AuditLogger("test.audit.json")
    logger.log_event("test_event", correlation_id="cid-1", device_id=3)
    captured = capfd.readouterr()
    payload = json.loads(captured.err.strip())
    assert payload["event"] == "test_event"
    assert payload["correlation_id"] == "cid-1"
    assert payload["device_id"] == 3
    assert payload["level"] == "INFO"
    assert "timestamp" in payload


def test_audit_logger_returns_payload():
    logger = AuditLogger("test.audit.returns")
    result = logger.log_event("ev", correlation_id="c1", foo="bar")
    assert result == {"event": "ev", "correlation_id": "c1", "foo": "bar"}


def test_disabled_logger_emits_nothing(capfd):
    logger = AuditLogger("test.audit.disabled", enabled=False)
    result = logger.log_event("quiet", foo=1)
    assert result["event"] == "quiet"
    assert capfd.readouterr().err == ""


def test_get_audit_logger_returns_instance():
    assert isinstance(get_audit_logger(), AuditLogger)


# ---- Store events ---------------------------------------------------------


def test_append_logs_record_appended(audit_records):
    log = CalibrationLog()
    log.record_calibration("tech-1", 9, 100, "ok", 200, True)

    appended = [e for e in audit_records() if e["event"] == "record_appended"]
    assert appended == [{
        "event": "record_appended",
        "log": "calibration",
        "device_id": 9,
        "sequence": 1,
        "caller": "tech-1",
    }]


def test_missing_lookup_logs_record_not_found(audit_records):
    log = UsageLog()
    assert log.get_usage_log("dev", 4) is None

    missing = [e for e in audit_records() if e["event"] == "record_not_found"]
    assert len(missing) == 1
    assert missing[0]["log"] == "usage"
    assert missing[0]["sequence"] == 4


def test_overflow_logged_as_error(audit_records, caplog):
    log = UsageLog(StoreConfig(name="usage", max_sequence=1))
    log.log_usage("dr", 1, 0, 1, "p", "P1", "")
    with pytest.raises(SequenceOverflowError):
        log.log_usage("dr", 1, 2, 3, "p", "P1", "")

    overflow = [r for r in caplog.records if r.getMessage() == "sequence_overflow"]
    assert len(overflow) == 1
    assert overflow[0].levelno == logging.ERROR
    assert overflow[0]._structured["limit"] == 1


def test_due_check_logs_reason(audit_records):
    log = CalibrationLog()
    log.is_calibration_due(1, 50)
    log.record_calibration("tech", 1, 0, "ok", 100, True)
    log.is_calibration_due(1, 50)
    log.is_calibration_due(1, 100)

    reasons = [e["reason"] for e in audit_records() if e["event"] == "calibration_due_check"]
    assert reasons == ["never_calibrated", "within_interval", "past_due_date"]


def test_audit_logging_disabled_by_config(audit_records):
    log = CalibrationLog(StoreConfig(name="calibration", audit_logging=False))
    log.record_calibration("tech", 1, 0, "ok", 100, True)
    log.is_calibration_due(1, 50)
    assert audit_records() == []
