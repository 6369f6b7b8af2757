from __future__ import annotations

from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRulesConfig
from src.payroll_system.payroll_system.employees.model import Employee, SalariedPay
from src.payroll_system.payroll_system.payroll.model import PayrollConfig
from src.payroll_system.payroll_system.shifts.model import Shift


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 20, 0)


@pytest.fixture
def rules() -> AttendanceRulesConfig:
    return AttendanceRulesConfig()


@pytest.fixture
def day_shift() -> Shift:
    return Shift(start_time="08:00", end_time="17:00", shift_name="Day")


@pytest.fixture
def payroll_config() -> PayrollConfig:
    return PayrollConfig(
        employee_pension_rate=5,
        employer_pension_rate=5,
        employee_health_rate=1,
        employer_health_rate=1,
        tax_rate=25,
        overtime_multiplier=1.5,
        daily_target_hours=8,
        weekly_target_hours=40,
        monthly_target_hours=160,
        yearly_target_hours=1920,
    )


@pytest.fixture
def make_employee():
    def _make(employee_id: str = "e1", **overrides) -> Employee:
        fields = {
            "employee_id": employee_id,
            "name": f"Employee {employee_id}",
            "compensation": SalariedPay(salary=10000),
            "join_date": date(2020, 1, 15),
            "bank_name": "Zanaco",
            "account_number": f"ACC-{employee_id}",
        }
        fields.update(overrides)
        return Employee(**fields)

    return _make
