from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import StatusDecision
from .base import AttendanceStrategy


class LateStrategy(AttendanceStrategy):
    """Late check-in; reports the full lateness, not the overage past grace."""

    def decide_checkin(self, *, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, late_minutes=late_minutes)
