from __future__ import annotations

from datetime import time

from ...attendance.model import AttendanceDay
from ...core.constants import DEFAULT_STANDARD_END_OF_DAY
from .base import OvertimeCalculator


def _minute_of_day(t: time) -> int:
    return t.hour * 60 + t.minute


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: minutes the day ended past the standard end of day, not below 0."""

    def __init__(self, standard_end: time = DEFAULT_STANDARD_END_OF_DAY):
        self._standard_end = standard_end

    def overtime_minutes(self, day: AttendanceDay) -> int:
        if day.end_time is None:
            return 0
        minutes = _minute_of_day(day.end_time) - _minute_of_day(self._standard_end)
        return max(minutes, 0)
