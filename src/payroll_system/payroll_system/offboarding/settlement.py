"""Final settlement at offboarding: proration, leave payout and gratuity.

Gratuity is ``(salary * months) * max(1, years) / years``. With less than one
full year of service that divides by zero; the result is kept as the IEEE
value (inf, or nan for a zero numerator) rather than substituting a divisor,
and a warning is logged so the record can be reviewed.
"""

from __future__ import annotations

import logging
from datetime import date

import numpy as np

from ..common.datetime_utils import days_in_month, full_years_between
from ..employees.model import Employee
from ..payroll.compensation import is_statutory_exempt, monthly_salary
from ..payroll.deductions import exempt_breakdown, statutory_breakdown
from ..payroll.model import PayrollConfig
from .model import FinalSettlement

logger = logging.getLogger(__name__)


def _gratuity(salary: float, gratuity_months: float, years_of_service: int) -> float:
    if gratuity_months <= 0:
        return 0.0
    with np.errstate(divide="ignore", invalid="ignore"):
        amount = np.float64(salary * gratuity_months) * max(1, years_of_service) / np.float64(years_of_service)
    return float(amount)


class OffboardingSettlementCalculator:
    def compute(
        self,
        employee: Employee,
        last_working_day: date,
        config: PayrollConfig,
        gratuity_months: float = 0,
        additional_payout: float = 0,
    ) -> FinalSettlement:
        salary = monthly_salary(employee.compensation)

        month_days = days_in_month(last_working_day)
        days_worked = last_working_day.day
        daily_rate = salary / month_days
        prorated = daily_rate * days_worked
        leave_payout = employee.annual_leave_balance * daily_rate

        years = full_years_between(employee.join_date, last_working_day)
        gratuity = _gratuity(salary, gratuity_months, years)
        if not np.isfinite(gratuity):
            logger.warning(
                "[offboarding] employee_id=%s gratuity is %s (years_of_service=%s, gratuity_months=%s)",
                employee.employee_id,
                gratuity,
                years,
                gratuity_months,
            )

        gross = prorated + leave_payout + gratuity + additional_payout + employee.allowances + employee.bonus

        if is_statutory_exempt(employee.compensation):
            breakdown = exempt_breakdown(employee.deductions)
        else:
            breakdown = statutory_breakdown(gross, employee.deductions, config)

        return FinalSettlement(
            employee_id=employee.employee_id,
            last_working_day=last_working_day,
            days_in_month=month_days,
            days_worked=days_worked,
            daily_rate=daily_rate,
            prorated_salary=prorated,
            leave_payout=leave_payout,
            years_of_service=years,
            gratuity_amount=gratuity,
            additional_payout=additional_payout,
            gross_final_pay=gross,
            employee_pension_deduction=breakdown.employee_pension_deduction,
            employer_pension_contribution=breakdown.employer_pension_contribution,
            employee_health_deduction=breakdown.employee_health_deduction,
            employer_health_contribution=breakdown.employer_health_contribution,
            tax_deduction=breakdown.tax_deduction,
            total_deductions=breakdown.total_deductions,
            net_final_pay=gross - breakdown.total_deductions,
        )


def compute_final_settlement(
    employee: Employee,
    last_working_day: date,
    config: PayrollConfig,
    gratuity_months: float = 0,
    additional_payout: float = 0,
) -> FinalSettlement:
    return OffboardingSettlementCalculator().compute(employee, last_working_day, config, gratuity_months, additional_payout)
