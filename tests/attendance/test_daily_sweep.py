from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.attendance.sweep import plan_daily_sweep
from src.payroll_system.payroll_system.core.enums import AttendanceStatus


def open_record(employee_id: str, hour: int, minute: int = 0, **kw) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=employee_id,
        work_date=date(2026, 2, 2),
        check_in_time=datetime(2026, 2, 2, hour, minute),
        status=AttendanceStatus.PRESENT,
        **kw,
    )


def test_sweep_plans_absences_and_auto_clock_outs(payroll_config):
    records = [
        open_record("early", 8, break_minutes=30),
        open_record("recent", 12),
        replace(open_record("done", 8), check_out_time=datetime(2026, 2, 2, 16, 0)),
    ]
    now = datetime(2026, 2, 2, 18, 0)

    plan = plan_daily_sweep(["early", "recent", "done", "missing"], records, now, payroll_config)

    assert plan.absent_employee_ids == ["missing"]
    [auto] = plan.auto_clock_outs
    assert auto.employee_id == "early"
    assert auto.check_out_time == datetime(2026, 2, 2, 16, 0)
    assert auto.status == AttendanceStatus.AUTO_CLOCK_OUT
    assert auto.total_work_minutes == 480 - 30
    assert plan.processed == 2


def test_sweep_clocks_out_exactly_at_target(payroll_config):
    records = [open_record("a", 9, 30)]

    plan = plan_daily_sweep(["a"], records, datetime(2026, 2, 2, 17, 30), payroll_config)

    assert [r.check_out_time for r in plan.auto_clock_outs] == [datetime(2026, 2, 2, 17, 30)]


def test_sweep_defaults_to_eight_hours_without_config():
    records = [open_record("a", 9)]

    assert plan_daily_sweep(["a"], records, datetime(2026, 2, 2, 16, 59)).auto_clock_outs == []
    assert len(plan_daily_sweep(["a"], records, datetime(2026, 2, 2, 17, 0)).auto_clock_outs) == 1


def test_sweep_ignores_records_of_employees_not_listed(payroll_config):
    plan = plan_daily_sweep([], [open_record("x", 1)], datetime(2026, 2, 2, 23, 0), payroll_config)

    assert plan.auto_clock_outs == []
    assert plan.absent_employee_ids == []
