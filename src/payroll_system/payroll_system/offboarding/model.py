from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date


@dataclass(frozen=True)
class FinalSettlement:
    """Thực thể miền (domain): Quyết toán khi nghỉ việc, snapshot bất biến."""

    employee_id: str
    last_working_day: date
    days_in_month: int
    days_worked: int
    daily_rate: float
    prorated_salary: float
    leave_payout: float
    years_of_service: int
    gratuity_amount: float
    additional_payout: float
    gross_final_pay: float
    employee_pension_deduction: float
    employer_pension_contribution: float
    employee_health_deduction: float
    employer_health_contribution: float
    tax_deduction: float
    total_deductions: float
    net_final_pay: float

    def to_dict(self) -> dict:
        data = asdict(self)
        data["last_working_day"] = self.last_working_day.isoformat()
        return data
