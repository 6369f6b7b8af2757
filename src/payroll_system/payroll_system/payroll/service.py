from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..core.exceptions import ConfigurationError, ValidationError
from ..employees.model import Employee
from .ach import render_ach_csv
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollConfig, PayrollDetails, PayrollRun, PayrollRunEntry
from .variance import PayrollVarianceAnalyzer, VarianceReport

logger = logging.getLogger(__name__)


class PayrollRunService:
    """Assembles payroll runs and previews them against the previous period.

    A run is built completely in memory: either every eligible employee is
    calculated and a ``PayrollRun`` is returned, or an exception propagates
    and the caller has nothing to write.
    """

    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        analyzer: Optional[PayrollVarianceAnalyzer] = None,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._analyzer = analyzer or PayrollVarianceAnalyzer()

    def calculate(self, employee: Employee, config: PayrollConfig) -> PayrollDetails:
        return self._calculator.calculate(employee, config)

    def calculate_all(self, employees: Sequence[Employee], config: PayrollConfig) -> dict[str, PayrollDetails]:
        return {emp.employee_id: self._calculator.calculate(emp, config) for emp in employees}

    def build_run(self, employees: Sequence[Employee], config: PayrollConfig, *, run_date: datetime) -> PayrollRun:
        entries: dict[str, PayrollRunEntry] = {}
        for emp in employees:
            if not emp.has_bank_details:
                logger.warning("[payroll] skipping employee_id=%s (%s): missing bank details", emp.employee_id, emp.name)
                continue
            entries[emp.employee_id] = PayrollRunEntry(
                employee_id=emp.employee_id,
                employee_name=emp.name,
                details=self._calculator.calculate(emp, config),
            )

        if not entries:
            raise ValidationError("No employees with complete bank details found")

        run = PayrollRun(run_date=run_date, employees=entries)
        logger.info("[payroll] run built: employees=%s total=%.2f", run.employee_count, run.total_amount)
        return run

    def ach_file(self, run: PayrollRun, employees: Sequence[Employee]) -> str:
        return render_ach_csv(run, employees)

    def preview(
        self,
        employees: Sequence[Employee],
        config: Optional[PayrollConfig],
        previous_run: Optional[PayrollRun],
        *,
        current_details: Optional[Mapping[str, PayrollDetails]] = None,
    ) -> VarianceReport:
        if current_details is None:
            if config is None:
                raise ConfigurationError("Payroll configuration is required to calculate current details")
            current_details = self.calculate_all(employees, config)
        return self._analyzer.analyze(employees, current_details, previous_run)
