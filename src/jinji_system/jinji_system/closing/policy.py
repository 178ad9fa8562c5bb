"""Monthly closing rules for attendance and leave submissions.

A month stays editable until its deadline: the first Friday of the following
month, or the Friday after that when the 1st itself is a Friday. Payroll for
the month is cut after the deadline, so later edits are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Tuple

from ..common.year_month import YearMonth
from ..core.constants import DEADLINE_CUTOFF, DEFAULT_SUBMISSION_BUFFER_DAYS
from ..core.exceptions import OutOfWindowError

FRIDAY = 4


@dataclass(frozen=True)
class ClosingWindow:
    period_start: date
    period_end: date
    deadline: date

    @property
    def deadline_at(self) -> datetime:
        return datetime.combine(self.deadline, DEADLINE_CUTOFF)


def submission_deadline(period: YearMonth) -> date:
    """Deadline closing ``period``: first Friday strictly after the next month's 1st."""
    first = period.next().first_day
    offset = (FRIDAY - first.weekday()) % 7 or 7
    return first + timedelta(days=offset)


def month_closing_window(reference_date: date) -> ClosingWindow:
    """The period being closed is the month before ``reference_date``."""
    period = YearMonth.of(reference_date).previous()
    return ClosingWindow(
        period_start=period.first_day,
        period_end=period.last_day,
        deadline=submission_deadline(period),
    )


class CalendarPolicy:
    def __init__(self, *, buffer_days: int = DEFAULT_SUBMISSION_BUFFER_DAYS):
        if buffer_days < 0:
            raise ValueError("buffer_days must be >= 0")
        self._buffer_days = int(buffer_days)

    def month_closing_window(self, reference_date: date) -> ClosingWindow:
        return month_closing_window(reference_date)

    def editable_range(self, now: datetime) -> Tuple[date, date]:
        current = YearMonth.of(now.date())
        earliest = current.previous().last_day - timedelta(days=self._buffer_days)
        return earliest, current.last_day

    def is_within_submission_window(self, work_date: date, now: datetime) -> bool:
        earliest, latest = self.editable_range(now)
        if not earliest <= work_date <= latest:
            return False
        deadline = submission_deadline(YearMonth.of(work_date))
        return now <= datetime.combine(deadline, DEADLINE_CUTOFF)

    def check_submission_window(self, work_date: date, now: datetime) -> None:
        if self.is_within_submission_window(work_date, now):
            return
        earliest, latest = self.editable_range(now)
        raise OutOfWindowError(
            work_date,
            earliest=earliest,
            latest=latest,
            deadline=submission_deadline(YearMonth.of(work_date)),
        )
