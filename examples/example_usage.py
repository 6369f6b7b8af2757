"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: tính lương một kỳ, so sánh với kỳ trước, rồi quyết toán khi nghỉ việc.
"""

import importlib
from datetime import date, datetime

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.employees.model import Employee, HourlyPay, SalariedPay
from src.payroll_system.payroll_system.payroll.model import PayrollConfig


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(attendance_rules=settings.ATTENDANCE_RULES)

    config = PayrollConfig(
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
    employees = [
        Employee(
            employee_id="e1",
            name="Mwila",
            compensation=SalariedPay(salary=10000),
            join_date=date(2020, 3, 1),
            allowances=500,
            annual_leave_balance=12,
            bank_name="Zanaco",
            account_number="001",
        ),
        Employee(
            employee_id="e2",
            name="Chanda",
            compensation=HourlyPay(hourly_rate=50, hours_worked=160, overtime_hours=10),
            join_date=date(2024, 6, 1),
            bank_name="Stanbic",
            account_number="002",
        ),
    ]

    service = container.payroll_run_service
    run = service.build_run(employees, config, run_date=datetime(2026, 1, 31))
    print(service.ach_file(run, employees))

    report = service.preview(employees, config, run)
    print(report.summary)

    settlement = container.settlement_calculator.compute(employees[0], date(2026, 2, 14), config, gratuity_months=1)
    print(settlement.net_final_pay)


if __name__ == "__main__":
    main()
