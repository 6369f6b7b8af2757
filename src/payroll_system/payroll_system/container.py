from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.model import AttendanceRulesConfig
from .attendance.service import AttendanceService
from .offboarding.settlement import OffboardingSettlementCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollRunService
from .payroll.variance import PayrollVarianceAnalyzer


@dataclass(frozen=True)
class Container:
    attendance_rules: AttendanceRulesConfig
    strategy_factory: AttendanceStrategyFactory

    payroll_calculator: StandardPayrollCalculator
    variance_analyzer: PayrollVarianceAnalyzer
    settlement_calculator: OffboardingSettlementCalculator

    attendance_service: AttendanceService
    payroll_run_service: PayrollRunService


def build_container(*, attendance_rules: Optional[Mapping] = None) -> Container:
    rules = AttendanceRulesConfig().with_overrides(**dict(attendance_rules or {}))
    strategy_factory = AttendanceStrategyFactory()

    payroll_calculator = StandardPayrollCalculator()
    variance_analyzer = PayrollVarianceAnalyzer()
    settlement_calculator = OffboardingSettlementCalculator()

    attendance_service = AttendanceService(rules, strategy_factory=strategy_factory)
    payroll_run_service = PayrollRunService(calculator=payroll_calculator, analyzer=variance_analyzer)

    return Container(
        attendance_rules=rules,
        strategy_factory=strategy_factory,
        payroll_calculator=payroll_calculator,
        variance_analyzer=variance_analyzer,
        settlement_calculator=settlement_calculator,
        attendance_service=attendance_service,
        payroll_run_service=payroll_run_service,
    )
