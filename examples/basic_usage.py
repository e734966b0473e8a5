"""Example: basic usage of equipment-records."""

from equipment_records import CalibrationLog, StoreConfig, UsageLog

calibrations = CalibrationLog(StoreConfig(name="calibration", audit_logging=False))
usage = UsageLog(StoreConfig(name="usage", audit_logging=False))

# Record calibrations for an infusion pump
calibrations.record_calibration("technician-1", "pump-07", 1620000000, "Within tolerance", 1650000000, True)
calibrations.record_calibration("technician-2", "pump-07", 1650000000, "Flow rate drift", 1680000000, False)

# Log some usage sessions
usage.log_usage("doctor-1", "pump-07", 1620000000, 1620003600, "Infusion", "P12345", "")
usage.log_usage("doctor-2", "pump-07", 1620100000, 1620107200, "Infusion", "P67890", "Night shift")

latest = calibrations.get_latest_calibration("pump-07")
print(f"Calibrations : {calibrations.get_calibration_count('pump-07')}")
print(f"Latest       : {latest.to_dict()}")
print(f"Due at 1670000000? {calibrations.is_calibration_due('pump-07', 1670000000)}")
print(f"Due at 1680000000? {calibrations.is_calibration_due('pump-07', 1680000000)}")

print(f"Usage sessions: {usage.get_usage_count('pump-07')}")
for record in usage.history("pump-07"):
    print(f"  {record.user}: {record.purpose}, {record.duration_seconds}s")
