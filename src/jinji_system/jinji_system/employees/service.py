from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from werkzeug.security import check_password_hash

from ..core.constants import MANAGER_ID_RANGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..database.store import Store
from .model import AuthContext
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_LOGIN_FAILED = "Invalid employee id or password"


@dataclass(frozen=True)
class SessionEmployee:
    """What we store into Flask session after login."""

    employee_id: int
    name: str
    role: Role

    @property
    def auth_context(self) -> AuthContext:
        return AuthContext(employee_id=self.employee_id, is_manager=self.role == Role.MANAGER)


class AuthService:
    """Use case: authenticate employee (login)."""

    def __init__(self, store: Store, *, manager_ids: Tuple[int, int] = MANAGER_ID_RANGE):
        self._store = store
        self._manager_ids = manager_ids

    def authenticate(self, employee_id, password: str) -> SessionEmployee:
        try:
            employee_id = int(employee_id)
        except (TypeError, ValueError):
            raise ValidationError("Employee id must be an integer")

        if not isinstance(password, str):
            raise ValidationError("Password must be a string")

        with self._store.transaction() as tx:
            employee = EmployeeRepository(tx, manager_ids=self._manager_ids).get_by_id(employee_id)

        if not employee:
            raise AuthenticationError(_LOGIN_FAILED)

        try:
            ok = check_password_hash(employee.credential_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("login rejected for employee %s", employee_id)
            raise AuthenticationError(_LOGIN_FAILED)

        logger.info("employee %s logged in as %s", employee_id, employee.role.value)
        return SessionEmployee(employee_id=employee.employee_id, name=employee.name, role=employee.role)
