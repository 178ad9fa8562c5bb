from __future__ import annotations

from datetime import date
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ForbiddenError(DomainError):
    """Raised when the caller may not act on the target record.

    The message never carries the submitted or stored field values.
    """


class NotFoundError(DomainError):
    """Raised when an operation requires a record that does not exist."""


class OutOfWindowError(DomainError):
    """Raised when a date is outside the editable attendance/leave period."""

    def __init__(self, work_date: date, *, earliest: date, latest: date, deadline: Optional[date] = None):
        self.work_date = work_date
        self.earliest = earliest
        self.latest = latest
        self.deadline = deadline
        msg = (
            f"{work_date.isoformat()} is outside the editable period "
            f"{earliest.isoformat()} .. {latest.isoformat()}"
        )
        if deadline is not None:
            msg += f" (submissions for {work_date:%Y-%m} closed after {deadline.isoformat()})"
        super().__init__(msg)


class StoreFailure(DomainError):
    """Raised when a transaction could not be committed.

    The transaction has been rolled back; callers may retry.
    """

    retryable = True
