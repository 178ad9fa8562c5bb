from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import session

from ..core.enums import Role
from ..employees.model import AuthContext
from ..employees.service import SessionEmployee
from .http import fail
from .validators import require_employee_id


def store_login(s_employee: SessionEmployee) -> None:
    session.clear()
    session["employee_id"] = s_employee.employee_id
    session["name"] = s_employee.name
    session["role"] = s_employee.role.value


def current_caller() -> Optional[AuthContext]:
    if "employee_id" not in session:
        return None
    return AuthContext(
        employee_id=int(session["employee_id"]),
        is_manager=session.get("role") == Role.MANAGER.value,
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return fail("Please log in to continue", status=401, code="LOGIN_REQUIRED")
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return fail("Please log in to continue", status=401, code="LOGIN_REQUIRED")
        if session.get("role") != Role.MANAGER.value:
            return fail("Managers only", status=403, code="FORBIDDEN")
        return view(*args, **kwargs)

    return wrapper


def resolve_target(caller: AuthContext, value) -> int:
    """Employee a request acts on: the caller unless ``emplid`` names someone else."""
    if value is None or value == "":
        return caller.employee_id
    employee_id = require_employee_id(value)
    caller.require_access(employee_id)
    return employee_id
