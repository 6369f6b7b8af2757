from __future__ import annotations

import logging

from ...employees.model import Employee
from ..compensation import base_pay, is_statutory_exempt, overtime_pay
from ..deductions import exempt_breakdown, statutory_breakdown
from ..model import PayrollConfig, PayrollDetails
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = base + overtime + allowances + bonus + reimbursements,
    then pension -> health -> tax on (gross - pension), contractors exempt.
    """

    def calculate(self, employee: Employee, config: PayrollConfig) -> PayrollDetails:
        base = base_pay(employee.compensation)
        overtime = overtime_pay(employee.compensation, config)
        gross = base + overtime + employee.allowances + employee.bonus + employee.reimbursements

        if is_statutory_exempt(employee.compensation):
            breakdown = exempt_breakdown(employee.deductions)
        else:
            breakdown = statutory_breakdown(gross, employee.deductions, config)

        details = PayrollDetails(
            base_pay=base,
            overtime_pay=overtime,
            gross_pay=gross,
            employee_pension_deduction=breakdown.employee_pension_deduction,
            employer_pension_contribution=breakdown.employer_pension_contribution,
            employee_health_deduction=breakdown.employee_health_deduction,
            employer_health_contribution=breakdown.employer_health_contribution,
            tax_deduction=breakdown.tax_deduction,
            total_deductions=breakdown.total_deductions,
            net_pay=gross - breakdown.total_deductions,
        )
        logger.debug(
            "[payroll] employee_id=%s type=%s gross=%s net=%s",
            employee.employee_id,
            employee.worker_type.value,
            details.gross_pay,
            details.net_pay,
        )
        return details


_default_calculator = StandardPayrollCalculator()


def calculate_payroll(employee: Employee, config: PayrollConfig) -> PayrollDetails:
    return _default_calculator.calculate(employee, config)
