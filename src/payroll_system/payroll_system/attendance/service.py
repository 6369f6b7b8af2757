from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..payroll.model import PayrollConfig
from ..shifts.model import Shift
from . import rules as attendance_rules
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceRulesConfig, BreakValidation
from .sweep import SweepPlan, plan_daily_sweep

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in / break / clock-out transitions over immutable records.

    Every method returns a new ``AttendanceRecord``; storing it (and keeping
    one record per employee per day) is the caller's job.
    """

    def __init__(
        self,
        rules: AttendanceRulesConfig,
        *,
        payroll_config: Optional[PayrollConfig] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._rules = rules
        self._payroll_config = payroll_config
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def rules(self) -> AttendanceRulesConfig:
        return self._rules

    def check_in(
        self,
        employee_id: str,
        *,
        now: datetime,
        shift: Optional[Shift] = None,
        existing: Optional[AttendanceRecord] = None,
    ) -> AttendanceRecord:
        if existing is not None and existing.work_date == now.date():
            if existing.is_open:
                raise ValidationError("Employee is already checked in today")
            raise ValidationError("Employee has already checked out today")

        decision = attendance_rules.determine_attendance_status(now, shift, self._rules, factory=self._factory)
        logger.debug("[attendance] check-in employee_id=%s status=%s late=%s", employee_id, decision.status.value, decision.late_minutes)
        return AttendanceRecord(
            employee_id=employee_id,
            work_date=now.date(),
            check_in_time=now,
            status=decision.status,
            late_minutes=decision.late_minutes,
        )

    def start_break(self, record: AttendanceRecord, *, now: datetime) -> AttendanceRecord:
        if not record.is_open:
            raise ValidationError("Cannot start a break after checking out")
        if record.status == AttendanceStatus.ON_BREAK:
            raise ValidationError("Break already in progress")
        return replace(record, status=AttendanceStatus.ON_BREAK, break_started_at=now)

    def end_break(self, record: AttendanceRecord, *, now: datetime) -> tuple[AttendanceRecord, BreakValidation]:
        if record.status != AttendanceStatus.ON_BREAK or record.break_started_at is None:
            raise ValidationError("No break in progress")

        taken = attendance_rules.calculate_break_duration(record.break_started_at, now)
        validation = attendance_rules.validate_break_duration(taken, self._rules)
        if not validation.is_valid:
            logger.info("[attendance] employee_id=%s %s", record.employee_id, validation.message)

        updated = replace(
            record,
            status=self._checkin_status(record),
            break_started_at=None,
            break_minutes=record.break_minutes + taken,
        )
        return updated, validation

    def check_out(self, record: AttendanceRecord, *, now: datetime, shift: Optional[Shift] = None) -> AttendanceRecord:
        if not record.is_open:
            raise ValidationError("Employee has already checked out today")

        if record.status == AttendanceStatus.ON_BREAK:
            record, _ = self.end_break(record, now=now)

        return replace(
            record,
            check_out_time=now,
            total_work_minutes=attendance_rules.calculate_work_minutes(record.check_in_time, now, record.break_minutes),
            overtime_minutes=attendance_rules.calculate_overtime_minutes(
                record.check_in_time, now, record.break_minutes, shift, self._payroll_config, self._rules
            ),
            early_leave_minutes=attendance_rules.calculate_early_leave_minutes(now, shift, self._rules),
        )

    def daily_sweep(
        self,
        employee_ids: Sequence[str],
        records: Sequence[AttendanceRecord],
        *,
        now: datetime,
        payroll_config: Optional[PayrollConfig] = None,
    ) -> SweepPlan:
        return plan_daily_sweep(employee_ids, records, now, payroll_config or self._payroll_config)

    def _checkin_status(self, record: AttendanceRecord) -> AttendanceStatus:
        # Late check-ins are the only ones that carry late minutes
        return AttendanceStatus.LATE if record.late_minutes > 0 else AttendanceStatus.PRESENT
