"""Decode JSON request bodies into engine value objects.

Malformed dates raise ``ValueError`` from the parsing primitives; missing or
non-numeric fields, and timestamps that mix offset-aware and naive
values, raise ``ValidationError``. Controllers map all of these to 400.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, WorkerType
from ..core.exceptions import ConfigurationError, ValidationError
from ..employees.model import Compensation, ContractorPay, Employee, HourlyPay, SalariedPay
from ..payroll.model import PayrollConfig, PayrollDetails, PayrollRun, PayrollRunEntry
from ..shifts.model import Shift
from .datetime_utils import parse_iso_date, parse_iso_datetime
from .validators import require_non_empty, require_number

_PAYROLL_CONFIG_FIELDS = (
    "employee_pension_rate",
    "employer_pension_rate",
    "employee_health_rate",
    "employer_health_rate",
    "tax_rate",
    "overtime_multiplier",
    "daily_target_hours",
    "weekly_target_hours",
    "monthly_target_hours",
    "yearly_target_hours",
)


def _num(data: Mapping[str, Any], key: str, default: Optional[float] = None) -> float:
    return require_number(data.get(key), key, default=default)


def compensation_from_dict(data: Mapping[str, Any]) -> Compensation:
    try:
        worker_type = WorkerType(data.get("worker_type"))
    except ValueError:
        raise ValidationError(f"worker_type must be one of {[t.value for t in WorkerType]}") from None

    if worker_type == WorkerType.HOURLY:
        return HourlyPay(
            hourly_rate=_num(data, "hourly_rate"),
            hours_worked=_num(data, "hours_worked"),
            overtime_hours=_num(data, "overtime", 0),
        )
    if worker_type == WorkerType.SALARIED:
        return SalariedPay(salary=_num(data, "salary"), overtime_amount=_num(data, "overtime", 0))
    return ContractorPay(contract_amount=_num(data, "salary"), overtime_amount=_num(data, "overtime", 0))


def employee_from_dict(data: Mapping[str, Any]) -> Employee:
    return Employee(
        employee_id=require_non_empty(data.get("id"), "id"),
        name=data.get("name") or "",
        compensation=compensation_from_dict(data),
        join_date=parse_iso_date(require_non_empty(data.get("join_date"), "join_date")),
        allowances=_num(data, "allowances", 0),
        bonus=_num(data, "bonus", 0),
        reimbursements=_num(data, "reimbursements", 0),
        deductions=_num(data, "deductions", 0),
        annual_leave_balance=_num(data, "annual_leave_balance", 0),
        bank_name=data.get("bank_name"),
        account_number=data.get("account_number"),
        branch_code=data.get("branch_code"),
    )


def payroll_config_from_dict(data: Optional[Mapping[str, Any]]) -> PayrollConfig:
    if not data:
        raise ConfigurationError("Payroll configuration not found. Please set it up in Settings.")
    return PayrollConfig(**{name: _num(data, name) for name in _PAYROLL_CONFIG_FIELDS})


def optional_payroll_config_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[PayrollConfig]:
    return payroll_config_from_dict(data) if data else None


def shift_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[Shift]:
    if not data:
        return None
    return Shift(
        start_time=require_non_empty(data.get("start_time"), "start_time"),
        end_time=require_non_empty(data.get("end_time"), "end_time"),
        shift_name=data.get("name") or "",
    )


def details_from_dict(data: Mapping[str, Any]) -> PayrollDetails:
    return PayrollDetails(**{name: _num(data, name) for name in PayrollDetails.__dataclass_fields__})


def payroll_run_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[PayrollRun]:
    if not data:
        return None
    entries = {}
    for employee_id, entry in (data.get("employees") or {}).items():
        entries[employee_id] = PayrollRunEntry(
            employee_id=employee_id,
            employee_name=entry.get("employee_name") or "",
            details=details_from_dict(entry),
        )
    return PayrollRun(run_date=parse_iso_datetime(require_non_empty(data.get("run_date"), "run_date")), employees=entries)


def attendance_record_from_dict(data: Mapping[str, Any]) -> AttendanceRecord:
    check_in = parse_iso_datetime(require_non_empty(data.get("check_in_time"), "check_in_time"))
    try:
        status = AttendanceStatus(data.get("status"))
    except ValueError:
        raise ValidationError(f"status must be one of {[s.value for s in AttendanceStatus]}") from None

    check_out = data.get("check_out_time")
    check_out = parse_iso_datetime(check_out) if check_out else None
    require_same_clock(check_in, check_out)

    work_date = data.get("date")
    return AttendanceRecord(
        employee_id=require_non_empty(data.get("employee_id"), "employee_id"),
        work_date=parse_iso_date(work_date) if work_date else check_in.date(),
        check_in_time=check_in,
        check_out_time=check_out,
        status=status,
        total_work_minutes=int(_num(data, "total_work_minutes", 0)),
        overtime_minutes=int(_num(data, "overtime_minutes", 0)),
    )


def timestamp(data: Mapping[str, Any], key: str) -> datetime:
    return parse_iso_datetime(require_non_empty(data.get(key), key))


def require_same_clock(*moments: Optional[datetime]) -> None:
    """Offset-aware and naive timestamps can't be compared; reject the mix."""
    kinds = {m.tzinfo is not None and m.utcoffset() is not None for m in moments if m is not None}
    if len(kinds) > 1:
        raise ValidationError("Timestamps must either all carry a UTC offset or all omit it")
