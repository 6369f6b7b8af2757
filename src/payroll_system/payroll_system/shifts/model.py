from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import at_wall_clock, parse_wall_clock


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm việc (Shift).

    Times are ``HH:MM`` wall-clock strings without a date; they are placed on
    the calendar day of whatever timestamp is being evaluated.
    """

    start_time: str
    end_time: str
    shift_name: str = ""

    def start_on(self, moment: datetime) -> datetime:
        return at_wall_clock(moment, self.start_time)

    def end_on(self, moment: datetime) -> datetime:
        return at_wall_clock(moment, self.end_time)

    @property
    def length_minutes(self) -> int:
        start = parse_wall_clock(self.start_time)
        end = parse_wall_clock(self.end_time)
        return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)
