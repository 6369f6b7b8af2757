from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import WorkerType


@dataclass(frozen=True)
class SalariedPay:
    """Monthly salary; overtime is a flat currency amount."""

    salary: float
    overtime_amount: float = 0.0

    @property
    def worker_type(self) -> WorkerType:
        return WorkerType.SALARIED


@dataclass(frozen=True)
class HourlyPay:
    """Paid per hour worked; overtime is counted in hours."""

    hourly_rate: float
    hours_worked: float
    overtime_hours: float = 0.0

    @property
    def worker_type(self) -> WorkerType:
        return WorkerType.HOURLY


@dataclass(frozen=True)
class ContractorPay:
    """Fixed contract amount; overtime is a flat currency amount."""

    contract_amount: float
    overtime_amount: float = 0.0

    @property
    def worker_type(self) -> WorkerType:
        return WorkerType.CONTRACTOR


Compensation = Union[SalariedPay, HourlyPay, ContractorPay]


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên, ảnh chụp bất biến cho mỗi lần tính."""

    employee_id: str
    name: str
    compensation: Compensation
    join_date: date
    allowances: float = 0.0
    bonus: float = 0.0
    reimbursements: float = 0.0
    deductions: float = 0.0
    annual_leave_balance: float = 0.0
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    branch_code: Optional[str] = None

    @property
    def worker_type(self) -> WorkerType:
        return self.compensation.worker_type

    @property
    def has_bank_details(self) -> bool:
        return bool(self.bank_name and self.account_number)
