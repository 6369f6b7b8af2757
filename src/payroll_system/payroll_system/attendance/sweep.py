"""End-of-day attendance sweep planner.

Decides which open sessions get an automatic clock-out and which employees
are marked absent. It only returns a plan; applying it is up to the
persistence layer, which should write the whole plan or nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..core.constants import DEFAULT_DAILY_TARGET_HOURS
from ..core.enums import AttendanceStatus
from ..payroll.model import PayrollConfig
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepPlan:
    auto_clock_outs: list[AttendanceRecord]
    absent_employee_ids: list[str]

    @property
    def processed(self) -> int:
        return len(self.auto_clock_outs) + len(self.absent_employee_ids)


def plan_daily_sweep(
    employee_ids: Sequence[str],
    records: Sequence[AttendanceRecord],
    now: datetime,
    payroll_config: Optional[PayrollConfig] = None,
) -> SweepPlan:
    daily_hours = payroll_config.daily_target_hours if payroll_config and payroll_config.daily_target_hours else DEFAULT_DAILY_TARGET_HOURS
    by_employee = {r.employee_id: r for r in records}

    auto_clock_outs: list[AttendanceRecord] = []
    absent: list[str] = []

    for employee_id in employee_ids:
        record = by_employee.get(employee_id)
        if record is None:
            absent.append(employee_id)
            continue
        if not record.is_open:
            continue

        clock_out_at = record.check_in_time + timedelta(hours=daily_hours)
        if now >= clock_out_at:
            auto_clock_outs.append(
                replace(
                    record,
                    check_out_time=clock_out_at,
                    status=AttendanceStatus.AUTO_CLOCK_OUT,
                    break_started_at=None,
                    total_work_minutes=minutes_between(record.check_in_time, clock_out_at) - record.break_minutes,
                )
            )

    logger.info("[attendance] sweep planned: auto_clock_outs=%s absent=%s", len(auto_clock_outs), len(absent))
    return SweepPlan(auto_clock_outs=auto_clock_outs, absent_employee_ids=absent)
