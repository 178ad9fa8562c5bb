from __future__ import annotations

from datetime import date
from typing import List

from ..core.enums import DayKind, LeaveType
from ..database.mysql_base import normalize_mysql_time
from ..database.store import ATTENDANCE_DAYS, LEAVE_DAYS, Row, Transaction
from .model import AttendanceDay, LeaveDay

_TABLE_FOR_KIND = {
    DayKind.ATTENDANCE: ATTENDANCE_DAYS.name,
    DayKind.LEAVE: LEAVE_DAYS.name,
}


def _to_attendance(r: Row) -> AttendanceDay:
    return AttendanceDay(
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
    )


def _to_leave(r: Row) -> LeaveDay:
    return LeaveDay(
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        leave_type=LeaveType(int(r["leave_type"])),
    )


class DayRepository:
    """Attendance and leave rows, bound to one open transaction."""

    def __init__(self, tx: Transaction):
        self._tx = tx

    def upsert_attendance(self, day: AttendanceDay) -> None:
        self._tx.upsert(
            ATTENDANCE_DAYS.name,
            (day.employee_id, day.work_date),
            {"start_time": day.start_time, "end_time": day.end_time},
        )

    def upsert_leave(self, day: LeaveDay) -> None:
        self._tx.upsert(
            LEAVE_DAYS.name,
            (day.employee_id, day.work_date),
            {"leave_type": int(day.leave_type)},
        )

    def delete(self, kind: DayKind, employee_id: int, work_date: date) -> bool:
        return self._tx.delete(_TABLE_FOR_KIND[kind], (employee_id, work_date))

    def list_attendance(self, employee_id: int, start: date, end: date) -> List[AttendanceDay]:
        rows = self._tx.query(ATTENDANCE_DAYS.name, (employee_id,), between=(start, end), order_by="work_date")
        return [_to_attendance(r) for r in rows]

    def list_leave(self, employee_id: int, start: date, end: date) -> List[LeaveDay]:
        rows = self._tx.query(LEAVE_DAYS.name, (employee_id,), between=(start, end), order_by="work_date")
        return [_to_leave(r) for r in rows]
