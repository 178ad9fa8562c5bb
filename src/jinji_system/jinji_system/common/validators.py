from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_SCORE, MIN_SCORE
from ..core.enums import LeaveType
from ..core.exceptions import ValidationError


def optional_text(value, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_employee_id(value) -> int:
    try:
        employee_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Employee id must be an integer")
    if employee_id <= 0:
        raise ValidationError("Employee id must be positive")
    return employee_id


def require_leave_type(value) -> LeaveType:
    try:
        return LeaveType(int(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Leave type must be one of 1..{len(LeaveType)}")


def optional_score(value, field_name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    try:
        score = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValidationError(f"{field_name} must be between {MIN_SCORE} and {MAX_SCORE}")
    return score
