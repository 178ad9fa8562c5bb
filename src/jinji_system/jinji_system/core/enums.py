from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """Role used for authorization, resolved once when the employee is loaded."""

    MANAGER = "manager"
    STAFF = "staff"


class DayKind(str, Enum):
    """Which of the two mutually exclusive day records is being written."""

    ATTENDANCE = "attendance"
    LEAVE = "leave"

    @property
    def opposite(self) -> "DayKind":
        return DayKind.LEAVE if self is DayKind.ATTENDANCE else DayKind.ATTENDANCE


class LeaveType(IntEnum):
    """Leave codes as stored in leave_days.leave_type."""

    ANNUAL = 1
    PRE_NATAL = 2
    POST_NATAL = 3
    CHILDCARE = 4
    FAMILY_CARE = 5
    CHILD_SICK_CARE = 6
    MENSTRUAL = 7
    MATERNAL_HEALTH = 8


class BasicSalarySource(str, Enum):
    """Where run_payroll takes the basic salary from."""

    CURRENT_RECORD = "current_record"
    PREVIOUS_RECORD = "previous_record"
    DEFAULT = "default"


class EvaluationStage(str, Enum):
    """Lifecycle of one (employee, month) evaluation; no lock after FINALIZED."""

    ABSENT = "absent"
    EMPLOYEE_ONLY = "employee_only"
    FINALIZED = "finalized"
