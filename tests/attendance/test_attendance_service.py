from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRulesConfig
from src.payroll_system.payroll_system.attendance.service import AttendanceService
from src.payroll_system.payroll_system.core.enums import AttendanceStatus
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute)


class InMemoryAttendance:
    """One record per (employee, day), like the persistence layer keeps them."""

    def __init__(self):
        self._by_employee_date = {}

    def get(self, employee_id, work_date):
        return self._by_employee_date.get((employee_id, work_date))

    def save(self, record):
        self._by_employee_date[(record.employee_id, record.work_date)] = record
        return record


@pytest.fixture
def svc(rules, payroll_config) -> AttendanceService:
    return AttendanceService(rules, payroll_config=payroll_config)


def test_full_day_late_with_break_and_overtime(svc, day_shift):
    repo = InMemoryAttendance()

    rec = repo.save(svc.check_in("e1", now=at(8, 20), shift=day_shift, existing=repo.get("e1", at(8).date())))
    assert rec.status == AttendanceStatus.LATE
    assert rec.late_minutes == 20

    rec = repo.save(svc.start_break(rec, now=at(12)))
    assert rec.status == AttendanceStatus.ON_BREAK

    rec, validation = svc.end_break(rec, now=at(12, 45))
    repo.save(rec)
    assert validation.is_valid is True
    assert rec.status == AttendanceStatus.LATE
    assert rec.break_minutes == 45

    rec = repo.save(svc.check_out(rec, now=at(18, 35), shift=day_shift))
    assert rec.check_out_time == at(18, 35)
    assert rec.total_work_minutes == 615 - 45
    assert rec.overtime_minutes == 570 - 540
    assert rec.early_leave_minutes == 0


def test_second_checkin_same_day_is_rejected(svc, day_shift):
    rec = svc.check_in("e1", now=at(8), shift=day_shift)

    with pytest.raises(ValidationError):
        svc.check_in("e1", now=at(9), shift=day_shift, existing=rec)


def test_checkin_allowed_when_existing_record_is_from_another_day(svc, day_shift):
    yesterday = svc.check_in("e1", now=datetime(2026, 2, 1, 8, 0), shift=day_shift)

    rec = svc.check_in("e1", now=at(8), shift=day_shift, existing=yesterday)

    assert rec.work_date == at(8).date()


def test_long_break_is_reported_but_not_rejected(day_shift, payroll_config):
    svc = AttendanceService(AttendanceRulesConfig(max_break_minutes=30), payroll_config=payroll_config)
    rec = svc.start_break(svc.check_in("e1", now=at(8), shift=day_shift), now=at(12))

    rec, validation = svc.end_break(rec, now=at(13))

    assert validation.is_valid is False
    assert "30 minutes" in validation.message
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.break_minutes == 60


def test_checkout_during_break_closes_the_break(svc, day_shift):
    rec = svc.start_break(svc.check_in("e1", now=at(8), shift=day_shift), now=at(15))

    rec = svc.check_out(rec, now=at(15, 30), shift=day_shift)

    assert rec.break_minutes == 30
    assert rec.total_work_minutes == 450 - 30
    assert rec.early_leave_minutes == 90
    assert rec.status == AttendanceStatus.PRESENT


def test_invalid_transitions(svc, day_shift):
    rec = svc.check_in("e1", now=at(8), shift=day_shift)

    with pytest.raises(ValidationError):
        svc.end_break(rec, now=at(9))

    on_break = svc.start_break(rec, now=at(10))
    with pytest.raises(ValidationError):
        svc.start_break(on_break, now=at(10, 5))

    done = svc.check_out(rec, now=at(17), shift=day_shift)
    with pytest.raises(ValidationError):
        svc.check_out(done, now=at(18), shift=day_shift)
    with pytest.raises(ValidationError):
        svc.start_break(done, now=at(18))


def test_daily_sweep_uses_service_payroll_config(rules, payroll_config):
    svc = AttendanceService(rules, payroll_config=replace(payroll_config, daily_target_hours=6))
    repo = InMemoryAttendance()
    repo.save(svc.check_in("e1", now=at(8)))

    plan = svc.daily_sweep(["e1", "e2"], [repo.get("e1", at(8).date())], now=at(14, 30))

    assert plan.absent_employee_ids == ["e2"]
    [auto] = plan.auto_clock_outs
    assert auto.check_out_time == at(14)
    assert auto.status == AttendanceStatus.AUTO_CLOCK_OUT
