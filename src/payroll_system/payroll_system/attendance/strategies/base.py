from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import StatusDecision


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide_checkin(self, *, late_minutes: int) -> StatusDecision:
        raise NotImplementedError
