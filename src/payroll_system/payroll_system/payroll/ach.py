from __future__ import annotations

import csv
import io
from typing import Sequence

from ..employees.model import Employee
from .model import PayrollRun

ACH_HEADERS = ["EmployeeName", "BankName", "AccountNumber", "BranchCode", "Amount"]


def render_ach_csv(run: PayrollRun, employees: Sequence[Employee]) -> str:
    """Bank transfer file for a run: one row per employee that was paid, in roster order."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(ACH_HEADERS)
    for emp in employees:
        entry = run.employees.get(emp.employee_id)
        if entry is None:
            continue
        writer.writerow([emp.name, emp.bank_name, emp.account_number, emp.branch_code or "", f"{entry.net_pay:.2f}"])
    return buf.getvalue()
