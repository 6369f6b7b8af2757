from __future__ import annotations

from dataclasses import dataclass

from .model import PayrollConfig


@dataclass(frozen=True)
class StatutoryBreakdown:
    employee_pension_deduction: float = 0.0
    employer_pension_contribution: float = 0.0
    employee_health_deduction: float = 0.0
    employer_health_contribution: float = 0.0
    tax_deduction: float = 0.0
    total_deductions: float = 0.0


def exempt_breakdown(other_deductions: float) -> StatutoryBreakdown:
    """Contractors: no statutory deductions, only the "other" field."""
    return StatutoryBreakdown(total_deductions=other_deductions)


def statutory_breakdown(gross: float, other_deductions: float, config: PayrollConfig) -> StatutoryBreakdown:
    """Apply pension, health and income tax to ``gross`` in their fixed order.

    Employer contributions are informational and never reduce the employee's
    pay. The taxable base is gross minus the employee pension deduction only;
    the health deduction is not subtracted before tax.
    """
    employee_pension = gross * config.employee_pension_rate / 100
    employer_pension = gross * config.employer_pension_rate / 100

    employee_health = gross * config.employee_health_rate / 100
    employer_health = gross * config.employer_health_rate / 100

    taxable = gross - employee_pension
    tax = taxable * config.tax_rate / 100

    return StatutoryBreakdown(
        employee_pension_deduction=employee_pension,
        employer_pension_contribution=employer_pension,
        employee_health_deduction=employee_health,
        employer_health_contribution=employer_health,
        tax_deduction=tax,
        total_deductions=employee_pension + employee_health + tax + other_deductions,
    )
