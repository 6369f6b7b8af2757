from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from ..core import constants
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRulesConfig:
    """Attendance rules for one company. Weekday indices: Sunday=0 ... Saturday=6."""

    grace_minutes: int = constants.DEFAULT_GRACE_MINUTES
    half_day_threshold_hours: float = constants.DEFAULT_HALF_DAY_THRESHOLD_HOURS
    auto_absent_after_hours: float = constants.DEFAULT_AUTO_ABSENT_AFTER_HOURS
    max_break_minutes: int = constants.DEFAULT_MAX_BREAK_MINUTES
    overtime_after_minutes: int = constants.DEFAULT_OVERTIME_AFTER_MINUTES
    weekend_days: frozenset[int] = field(default_factory=lambda: constants.DEFAULT_WEEKEND_DAYS)

    def __post_init__(self):
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))

    def with_overrides(self, **overrides) -> "AttendanceRulesConfig":
        return replace(self, **overrides)


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công, một bản ghi mỗi nhân viên mỗi ngày."""

    employee_id: str
    work_date: date
    check_in_time: datetime
    status: AttendanceStatus
    check_out_time: Optional[datetime] = None
    total_work_minutes: int = 0
    overtime_minutes: int = 0
    late_minutes: int = 0
    early_leave_minutes: int = 0
    break_started_at: Optional[datetime] = None
    break_minutes: int = 0

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        data["work_date"] = self.work_date.isoformat()
        for key in ("check_in_time", "check_out_time", "break_started_at"):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    late_minutes: int = 0


@dataclass(frozen=True)
class BreakValidation:
    is_valid: bool
    message: Optional[str] = None


@dataclass(frozen=True)
class DailySummary:
    total_employees: int
    present: int
    late: int
    absent: int
    on_break: int
    on_leave: int
    clocked_out: int
    average_work_hours: float
    total_overtime_hours: float
