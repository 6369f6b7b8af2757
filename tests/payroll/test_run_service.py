from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.payroll_system.payroll_system.core.exceptions import ConfigurationError, ValidationError
from src.payroll_system.payroll_system.employees.model import ContractorPay, HourlyPay
from src.payroll_system.payroll_system.payroll.calculator.base import PayrollCalculator
from src.payroll_system.payroll_system.payroll.model import PayrollDetails
from src.payroll_system.payroll_system.payroll.service import PayrollRunService

RUN_DATE = datetime(2026, 1, 31, 17, 0)


class FlatCalculator(PayrollCalculator):
    """Pays every employee the same net amount; records who was calculated."""

    def __init__(self, net_pay: float):
        self.net_pay = net_pay
        self.calls: list[str] = []

    def calculate(self, employee, config) -> PayrollDetails:
        self.calls.append(employee.employee_id)
        return PayrollDetails(
            base_pay=self.net_pay,
            overtime_pay=0,
            gross_pay=self.net_pay,
            employee_pension_deduction=0,
            employer_pension_contribution=0,
            employee_health_deduction=0,
            employer_health_contribution=0,
            tax_deduction=0,
            total_deductions=0,
            net_pay=self.net_pay,
        )


def test_build_run_keys_entries_by_employee_id(make_employee, payroll_config):
    emps = [make_employee("e1"), make_employee("e2", compensation=HourlyPay(hourly_rate=50, hours_worked=160))]

    run = PayrollRunService().build_run(emps, payroll_config, run_date=RUN_DATE)

    assert set(run.employees) == {"e1", "e2"}
    assert run.employees["e2"].employee_name == "Employee e2"
    assert run.employees["e2"].details.base_pay == 8000
    assert run.employee_count == 2
    assert run.total_amount == pytest.approx(run.employees["e1"].net_pay + run.employees["e2"].net_pay)
    assert run.ach_file_name == "ACH-PAYROLL-2026-01-31.csv"


def test_build_run_skips_employees_without_bank_details(make_employee, payroll_config, caplog):
    calc = FlatCalculator(1000)
    emps = [make_employee("e1"), make_employee("e2", bank_name=None), make_employee("e3", account_number="")]

    with caplog.at_level(logging.WARNING):
        run = PayrollRunService(calculator=calc).build_run(emps, payroll_config, run_date=RUN_DATE)

    assert list(run.employees) == ["e1"]
    assert calc.calls == ["e1"]
    assert "missing bank details" in caplog.text


def test_build_run_without_any_payable_employee_raises(make_employee, payroll_config):
    emps = [make_employee("e1", bank_name=None)]

    with pytest.raises(ValidationError):
        PayrollRunService().build_run(emps, payroll_config, run_date=RUN_DATE)


def test_run_entries_cannot_be_modified(make_employee, payroll_config):
    run = PayrollRunService().build_run([make_employee("e1")], payroll_config, run_date=RUN_DATE)

    with pytest.raises(TypeError):
        run.employees["e2"] = run.employees["e1"]


def test_ach_file_lists_paid_employees_in_roster_order(make_employee, payroll_config):
    emps = [
        make_employee("e2", name="Banda", branch_code="0101"),
        make_employee("e1", name="Phiri", bank_name=None),
        make_employee("e3", name="Tembo", compensation=ContractorPay(contract_amount=1234.5)),
    ]
    service = PayrollRunService(calculator=FlatCalculator(1234.5))
    run = service.build_run(emps, payroll_config, run_date=RUN_DATE)

    csv_text = service.ach_file(run, emps)

    assert csv_text.splitlines() == [
        "EmployeeName,BankName,AccountNumber,BranchCode,Amount",
        "Banda,Zanaco,ACC-e2,0101,1234.50",
        "Tembo,Zanaco,ACC-e3,,1234.50",
    ]


def test_preview_compares_fresh_calculation_with_previous_run(make_employee, payroll_config):
    service = PayrollRunService(calculator=FlatCalculator(1000))
    emps = [make_employee("e1"), make_employee("e2")]
    previous = service.build_run([emps[0]], payroll_config, run_date=RUN_DATE)

    report = PayrollRunService(calculator=FlatCalculator(1250)).preview(emps, payroll_config, previous)

    assert [(v.employee.employee_id, v.type.value, v.severity.value) for v in report.variances] == [
        ("e1", "increase", "high"),
        ("e2", "new", "medium"),
    ]


def test_preview_requires_config_when_details_are_not_given(make_employee):
    with pytest.raises(ConfigurationError):
        PayrollRunService().preview([make_employee("e1")], None, None)
