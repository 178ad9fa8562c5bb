from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional

from ..core.enums import LeaveType


def _hhmm(t: Optional[time]) -> Optional[str]:
    return t.strftime("%H:%M") if t else None


@dataclass(frozen=True)
class AttendanceDay:
    """A worked day. No row means no attendance was recorded."""

    employee_id: int
    work_date: date
    start_time: Optional[time]
    end_time: Optional[time]

    def to_dict(self) -> dict:
        return {
            "emplid": self.employee_id,
            "date": self.work_date.isoformat(),
            "start_time": _hhmm(self.start_time),
            "end_time": _hhmm(self.end_time),
        }


@dataclass(frozen=True)
class LeaveDay:
    """A day taken as leave; never coexists with an AttendanceDay for the same key."""

    employee_id: int
    work_date: date
    leave_type: LeaveType

    def to_dict(self) -> dict:
        return {
            "emplid": self.employee_id,
            "date": self.work_date.isoformat(),
            "leave_type": int(self.leave_type),
            "leave_name": self.leave_type.name.lower(),
        }


@dataclass(frozen=True)
class MonthDays:
    """Attendance and leave for one month, each ordered by date, disjoint per day."""

    attendance_days: List[AttendanceDay] = field(default_factory=list)
    leave_days: List[LeaveDay] = field(default_factory=list)
