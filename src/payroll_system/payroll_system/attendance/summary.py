from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, DailySummary


def calculate_daily_attendance_summary(records: Sequence[AttendanceRecord], total_employees: int) -> DailySummary:
    """Reduce one day's records into dashboard counts.

    ``absent`` counts employees with no record at all for the day. Leave is
    tracked by leave requests, so ``on_leave`` is always 0 here.
    """
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    late = sum(1 for r in records if r.status == AttendanceStatus.LATE)
    on_break = sum(1 for r in records if r.status == AttendanceStatus.ON_BREAK)
    clocked_out = sum(1 for r in records if r.check_out_time is not None)

    total_work_minutes = sum(r.total_work_minutes or 0 for r in records)
    total_overtime_minutes = sum(r.overtime_minutes or 0 for r in records)

    return DailySummary(
        total_employees=total_employees,
        present=present + late,
        late=late,
        absent=total_employees - len(records),
        on_break=on_break,
        on_leave=0,
        clocked_out=clocked_out,
        average_work_hours=(total_work_minutes / len(records)) / 60 if records else 0,
        total_overtime_hours=total_overtime_minutes / 60,
    )
