"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Attendance rules (company settings documents ship these defaults)
DEFAULT_GRACE_MINUTES = 15
DEFAULT_HALF_DAY_THRESHOLD_HOURS = 4
DEFAULT_AUTO_ABSENT_AFTER_HOURS = 4
DEFAULT_MAX_BREAK_MINUTES = 60
DEFAULT_OVERTIME_AFTER_MINUTES = 0
# Sunday=0 ... Saturday=6
DEFAULT_WEEKEND_DAYS = frozenset({0, 6})

# Used when neither a shift nor a payroll config is available
DEFAULT_DAILY_TARGET_HOURS = 8

# Net-pay variance thresholds, in percent
VARIANCE_HIGH_PERCENT = 20
VARIANCE_MEDIUM_PERCENT = 10
VARIANCE_LOW_PERCENT = 5

ACH_FILE_NAME_TEMPLATE = "ACH-PAYROLL-{run_date:%Y-%m-%d}.csv"
