from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.constants import MANAGER_ID_RANGE
from ..core.enums import Role
from ..core.exceptions import ForbiddenError


def role_for_employee_id(employee_id: int, manager_ids: Tuple[int, int] = MANAGER_ID_RANGE) -> Role:
    """The only place the id range is turned into a role."""
    low, high = manager_ids
    return Role.MANAGER if low <= int(employee_id) < high else Role.STAFF


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee. Created by onboarding, read-only here."""

    employee_id: int
    name: str
    credential_hash: str
    role: Role

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER


@dataclass(frozen=True)
class AuthContext:
    """Who is calling, resolved once at login."""

    employee_id: int
    is_manager: bool

    def can_act_for(self, employee_id: int) -> bool:
        return self.is_manager or self.employee_id == int(employee_id)

    def require_access(self, employee_id: int) -> None:
        if not self.can_act_for(employee_id):
            raise ForbiddenError("You do not have permission to access this employee's records")
