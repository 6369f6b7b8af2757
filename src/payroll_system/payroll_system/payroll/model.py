from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from ..core.constants import ACH_FILE_NAME_TEMPLATE


@dataclass(frozen=True)
class PayrollConfig:
    """Company-scoped payroll settings. Rates are percentages (5 means 5%)."""

    employee_pension_rate: float
    employer_pension_rate: float
    employee_health_rate: float
    employer_health_rate: float
    tax_rate: float
    overtime_multiplier: float
    daily_target_hours: float
    weekly_target_hours: float
    monthly_target_hours: float
    yearly_target_hours: float


@dataclass(frozen=True)
class PayrollDetails:
    base_pay: float
    overtime_pay: float
    gross_pay: float
    employee_pension_deduction: float
    employer_pension_contribution: float
    employee_health_deduction: float
    employer_health_contribution: float
    tax_deduction: float
    total_deductions: float
    net_pay: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PayrollRunEntry:
    """One employee's line in a payroll run: identity plus the breakdown."""

    employee_id: str
    employee_name: str
    details: PayrollDetails

    @property
    def net_pay(self) -> float:
        return self.details.net_pay

    def to_dict(self) -> dict:
        return {"employee_id": self.employee_id, "employee_name": self.employee_name, **self.details.to_dict()}


@dataclass(frozen=True)
class PayrollRun:
    """A settlement of record for one pay period, keyed by employee id."""

    run_date: datetime
    employees: Mapping[str, PayrollRunEntry] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "employees", MappingProxyType(dict(self.employees)))

    @property
    def employee_count(self) -> int:
        return len(self.employees)

    @property
    def total_amount(self) -> float:
        return sum(e.net_pay for e in self.employees.values())

    @property
    def ach_file_name(self) -> str:
        return ACH_FILE_NAME_TEMPLATE.format(run_date=self.run_date)

    def to_dict(self) -> dict:
        return {
            "run_date": self.run_date.isoformat(),
            "employee_count": self.employee_count,
            "total_amount": self.total_amount,
            "ach_file_name": self.ach_file_name,
            "employees": {k: v.to_dict() for k, v in self.employees.items()},
        }
