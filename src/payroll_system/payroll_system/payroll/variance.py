"""Cross-period payroll variance analysis.

Compares each employee's current net pay with the previous run, buckets the
percentage change into a severity and ranks the result high -> medium -> low.
Changes under the low threshold are left out of the list entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..core.constants import VARIANCE_HIGH_PERCENT, VARIANCE_LOW_PERCENT, VARIANCE_MEDIUM_PERCENT
from ..core.enums import VarianceSeverity, VarianceType
from ..employees.model import Employee
from .model import PayrollDetails, PayrollRun, PayrollRunEntry

_SEVERITY_ORDER = {VarianceSeverity.HIGH: 0, VarianceSeverity.MEDIUM: 1, VarianceSeverity.LOW: 2}

_SEVERITY_NOTE = {
    VarianceSeverity.HIGH: "requires review",
    VarianceSeverity.MEDIUM: "notable change",
    VarianceSeverity.LOW: "minor adjustment",
}

NEW_EMPLOYEE_REASON = "New employee added to payroll"


@dataclass(frozen=True)
class EmployeeVariance:
    employee: Employee
    current: PayrollDetails
    previous: Optional[PayrollRunEntry]
    variance: float
    variance_percent: float
    type: VarianceType
    severity: VarianceSeverity
    reason: str

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "employee_name": self.employee.name,
            "current_net_pay": self.current.net_pay,
            "previous_net_pay": self.previous.net_pay if self.previous else None,
            "variance": self.variance,
            "variance_percent": self.variance_percent,
            "type": self.type.value,
            "severity": self.severity.value,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class VarianceSummary:
    total_current: float
    total_previous: float
    total_variance: float
    variance_percent: float
    high_severity_count: int
    medium_severity_count: int
    new_employees: int
    employee_count: int


@dataclass(frozen=True)
class VarianceReport:
    variances: list[EmployeeVariance]
    summary: VarianceSummary


def classify_severity(percent: float) -> Optional[VarianceSeverity]:
    magnitude = abs(percent)
    if magnitude >= VARIANCE_HIGH_PERCENT:
        return VarianceSeverity.HIGH
    if magnitude >= VARIANCE_MEDIUM_PERCENT:
        return VarianceSeverity.MEDIUM
    if magnitude >= VARIANCE_LOW_PERCENT:
        return VarianceSeverity.LOW
    return None


class PayrollVarianceAnalyzer:
    def analyze(
        self,
        employees: Sequence[Employee],
        current_details: Mapping[str, PayrollDetails],
        previous_run: Optional[PayrollRun],
    ) -> VarianceReport:
        variances = self._variances(employees, current_details, previous_run)
        return VarianceReport(variances=variances, summary=self._summary(employees, current_details, previous_run, variances))

    def _variances(self, employees, current_details, previous_run) -> list[EmployeeVariance]:
        previous_entries = previous_run.employees if previous_run else {}
        result: list[EmployeeVariance] = []

        for emp in employees:
            current = current_details.get(emp.employee_id)
            if current is None:
                continue

            previous = previous_entries.get(emp.employee_id)
            if previous is None:
                result.append(
                    EmployeeVariance(
                        employee=emp,
                        current=current,
                        previous=None,
                        variance=current.net_pay,
                        variance_percent=100,
                        type=VarianceType.NEW,
                        severity=VarianceSeverity.MEDIUM,
                        reason=NEW_EMPLOYEE_REASON,
                    )
                )
                continue

            variance = current.net_pay - previous.net_pay
            percent = variance / previous.net_pay * 100 if previous.net_pay > 0 else 0
            severity = classify_severity(percent)
            if severity is None:
                continue

            kind = VarianceType.INCREASE if variance > 0 else VarianceType.DECREASE
            result.append(
                EmployeeVariance(
                    employee=emp,
                    current=current,
                    previous=previous,
                    variance=variance,
                    variance_percent=percent,
                    type=kind,
                    severity=severity,
                    reason=f"{abs(percent):.0f}% {kind.value} - {_SEVERITY_NOTE[severity]}",
                )
            )

        # sorted() is stable, so input order is kept within a tier
        return sorted(result, key=lambda v: _SEVERITY_ORDER[v.severity])

    def _summary(self, employees, current_details, previous_run, variances) -> VarianceSummary:
        total_current = sum(d.net_pay for d in current_details.values())
        total_previous = sum(e.net_pay for e in previous_run.employees.values()) if previous_run else 0
        total_variance = total_current - total_previous

        return VarianceSummary(
            total_current=total_current,
            total_previous=total_previous,
            total_variance=total_variance,
            variance_percent=total_variance / total_previous * 100 if total_previous > 0 else 0,
            high_severity_count=sum(1 for v in variances if v.severity == VarianceSeverity.HIGH),
            medium_severity_count=sum(1 for v in variances if v.severity == VarianceSeverity.MEDIUM),
            new_employees=sum(1 for v in variances if v.type == VarianceType.NEW),
            employee_count=len(employees),
        )


def analyze_variance(
    employees: Sequence[Employee],
    current_details: Mapping[str, PayrollDetails],
    previous_run: Optional[PayrollRun],
) -> VarianceReport:
    return PayrollVarianceAnalyzer().analyze(employees, current_details, previous_run)
