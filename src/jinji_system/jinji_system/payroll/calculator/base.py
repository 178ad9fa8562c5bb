from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceDay


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime)."""

    @abstractmethod
    def overtime_minutes(self, day: AttendanceDay) -> int:
        raise NotImplementedError

    def total_overtime_minutes(self, days: Iterable[AttendanceDay]) -> int:
        return sum(self.overtime_minutes(d) for d in days)
