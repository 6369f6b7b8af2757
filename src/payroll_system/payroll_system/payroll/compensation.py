"""Compensation model: base and overtime pay per worker type.

Dispatch is exhaustive over the ``Compensation`` variants; anything else is a
programming error and raises ``TypeError`` instead of falling through to the
wrong formula.
"""

from __future__ import annotations

from ..employees.model import Compensation, ContractorPay, HourlyPay, SalariedPay
from .model import PayrollConfig


def _unknown(compensation) -> TypeError:
    return TypeError(f"Unsupported compensation type: {type(compensation).__name__}")


def base_pay(compensation: Compensation) -> float:
    if isinstance(compensation, SalariedPay):
        return compensation.salary
    if isinstance(compensation, HourlyPay):
        return compensation.hourly_rate * compensation.hours_worked
    if isinstance(compensation, ContractorPay):
        return compensation.contract_amount
    raise _unknown(compensation)


def overtime_pay(compensation: Compensation, config: PayrollConfig) -> float:
    # Only hourly overtime is counted in hours; other types carry a flat amount.
    if isinstance(compensation, HourlyPay):
        return compensation.overtime_hours * compensation.hourly_rate * config.overtime_multiplier
    if isinstance(compensation, (SalariedPay, ContractorPay)):
        return compensation.overtime_amount
    raise _unknown(compensation)


def monthly_salary(compensation: Compensation) -> float:
    """Monthly base used for proration and gratuity at offboarding."""
    return base_pay(compensation)


def is_statutory_exempt(compensation: Compensation) -> bool:
    if isinstance(compensation, ContractorPay):
        return True
    if isinstance(compensation, (SalariedPay, HourlyPay)):
        return False
    raise _unknown(compensation)
