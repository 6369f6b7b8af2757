"""Attendance rules engine.

Pure functions that evaluate check-in/out times against an optional shift and
the company's ``AttendanceRulesConfig``. None of them raise for business edge
cases: they fall back to the least disruptive answer (Present, 0, False).
Malformed ``HH:MM`` strings raise ``ValueError`` from the parser.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import minutes_between, now_local
from ..core.constants import DEFAULT_DAILY_TARGET_HOURS
from ..payroll.model import PayrollConfig
from ..shifts.model import Shift
from .factory import AttendanceStrategyFactory
from .model import AttendanceRulesConfig, BreakValidation, StatusDecision

_factory = AttendanceStrategyFactory()


def determine_attendance_status(
    check_in_time: datetime,
    shift: Optional[Shift],
    rules: AttendanceRulesConfig,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    late_minutes = None
    if shift is not None:
        late_minutes = minutes_between(shift.start_on(check_in_time), check_in_time)

    strategy = (factory or _factory).for_checkin(late_minutes=late_minutes, rules=rules)
    return strategy.decide_checkin(late_minutes=late_minutes or 0)


def expected_work_minutes(shift: Optional[Shift], payroll_config: Optional[PayrollConfig]) -> int:
    if shift is not None:
        return shift.length_minutes
    daily_hours = payroll_config.daily_target_hours if payroll_config and payroll_config.daily_target_hours else DEFAULT_DAILY_TARGET_HOURS
    return int(round(daily_hours * 60))


def calculate_overtime_minutes(
    check_in_time: datetime,
    check_out_time: datetime,
    break_minutes: int,
    shift: Optional[Shift],
    payroll_config: Optional[PayrollConfig],
    rules: AttendanceRulesConfig,
) -> int:
    worked = minutes_between(check_in_time, check_out_time) - break_minutes
    overtime = worked - expected_work_minutes(shift, payroll_config) - rules.overtime_after_minutes
    return max(0, int(overtime))


def calculate_early_leave_minutes(check_out_time: datetime, shift: Optional[Shift], rules: AttendanceRulesConfig) -> int:
    if shift is None:
        return 0
    shift_end = shift.end_on(check_out_time)
    if check_out_time < shift_end:
        return minutes_between(check_out_time, shift_end)
    return 0


def should_mark_absent(shift: Optional[Shift], now: datetime, rules: AttendanceRulesConfig) -> bool:
    """Pure time predicate; only meaningful when the employee has not checked in yet."""
    if shift is None:
        return False
    cutoff = shift.start_on(now) + timedelta(minutes=rules.auto_absent_after_hours * 60)
    return now > cutoff


def validate_break_duration(break_minutes: float, rules: AttendanceRulesConfig) -> BreakValidation:
    if break_minutes > rules.max_break_minutes:
        return BreakValidation(
            is_valid=False,
            message=f"Break exceeded maximum allowed time of {rules.max_break_minutes} minutes",
        )
    return BreakValidation(is_valid=True)


def is_weekend(day: date, rules: AttendanceRulesConfig) -> bool:
    # date.weekday() is Monday=0; the rules use Sunday=0
    return (day.weekday() + 1) % 7 in rules.weekend_days


def calculate_work_minutes(
    check_in_time: datetime,
    check_out_time: Optional[datetime],
    break_minutes: int = 0,
    *,
    now: Optional[datetime] = None,
) -> int:
    """Worked minutes excluding breaks; an open session is measured up to ``now``."""
    end = check_out_time or now or now_local()
    return minutes_between(check_in_time, end) - break_minutes


def calculate_break_duration(break_in: Optional[datetime], break_out: Optional[datetime]) -> int:
    if not break_in or not break_out:
        return 0
    return minutes_between(break_in, break_out)


def format_minutes_as_time(minutes: int) -> str:
    minutes = abs(int(minutes))
    return f"{minutes // 60}h {minutes % 60}m"
