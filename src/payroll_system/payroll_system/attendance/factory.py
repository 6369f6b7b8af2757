from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .model import AttendanceRulesConfig
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, late_minutes: Optional[int], rules: AttendanceRulesConfig) -> AttendanceStrategy:
        # None means no shift was assigned
        if late_minutes is None:
            return PresentStrategy()
        if late_minutes <= 0 or late_minutes <= rules.grace_minutes:
            return PresentStrategy()
        return LateStrategy()
