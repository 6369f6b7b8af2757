from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import StatusDecision
from .base import AttendanceStrategy


class PresentStrategy(AttendanceStrategy):
    """On time, early, or within the grace period."""

    def decide_checkin(self, *, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, late_minutes=0)
