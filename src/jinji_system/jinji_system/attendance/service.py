from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Callable, Optional, Union

from ..closing.policy import CalendarPolicy
from ..common.datetime_utils import now_local, parse_hhmm, parse_iso_date
from ..common.validators import require_employee_id, require_leave_type
from ..common.year_month import YearMonth
from ..core.enums import DayKind
from ..core.exceptions import ValidationError
from ..database.store import Store
from ..employees.repository import EmployeeRepository
from .model import AttendanceDay, LeaveDay, MonthDays
from .repository import DayRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Records attendance or leave for one employee-day.

    The two kinds are mutually exclusive: writing one deletes the other for
    the same (employee, date) inside the same transaction.
    """

    def __init__(
        self,
        store: Store,
        *,
        policy: Optional[CalendarPolicy] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._policy = policy or CalendarPolicy()
        self._clock = clock

    def record_day(
        self,
        employee_id: int,
        work_date: Union[str, date],
        kind: Union[str, DayKind],
        *,
        start_time: Union[str, time, None] = None,
        end_time: Union[str, time, None] = None,
        leave_type: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Union[AttendanceDay, LeaveDay]:
        employee_id = require_employee_id(employee_id)
        work_date = parse_iso_date(work_date)
        try:
            kind = DayKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown day kind: {kind!r}")

        if kind is DayKind.LEAVE:
            day = LeaveDay(employee_id=employee_id, work_date=work_date, leave_type=require_leave_type(leave_type))
        else:
            start = parse_hhmm(start_time, "Start time")
            end = parse_hhmm(end_time, "End time")
            if start is None and end is None:
                raise ValidationError("Start time or end time is required")
            if start and end and end < start:
                raise ValidationError("End time cannot be earlier than start time")
            day = AttendanceDay(employee_id=employee_id, work_date=work_date, start_time=start, end_time=end)

        self._policy.check_submission_window(work_date, now or self._clock())

        with self._store.transaction() as tx:
            EmployeeRepository(tx).require(employee_id)
            days = DayRepository(tx)
            removed = days.delete(kind.opposite, employee_id, work_date)
            if kind is DayKind.LEAVE:
                days.upsert_leave(day)
            else:
                days.upsert_attendance(day)

        logger.info(
            "recorded %s for employee %s on %s%s",
            kind.value,
            employee_id,
            work_date.isoformat(),
            f" (replaced {kind.opposite.value})" if removed else "",
        )
        return day

    def record_attendance(self, employee_id: int, work_date, *, start_time=None, end_time=None, now=None) -> AttendanceDay:
        return self.record_day(
            employee_id, work_date, DayKind.ATTENDANCE, start_time=start_time, end_time=end_time, now=now
        )

    def record_leave(self, employee_id: int, work_date, *, leave_type, now=None) -> LeaveDay:
        return self.record_day(employee_id, work_date, DayKind.LEAVE, leave_type=leave_type, now=now)

    def list_days(self, employee_id: int, year_month: Union[str, YearMonth]) -> MonthDays:
        employee_id = require_employee_id(employee_id)
        ym = YearMonth.parse(year_month)

        with self._store.transaction() as tx:
            days = DayRepository(tx)
            return MonthDays(
                attendance_days=days.list_attendance(employee_id, ym.first_day, ym.last_day),
                leave_days=days.list_leave(employee_id, ym.first_day, ym.last_day),
            )
