from __future__ import annotations

from typing import Optional, Tuple

from ..core.constants import MANAGER_ID_RANGE
from ..core.exceptions import NotFoundError
from ..database.store import EMPLOYEES, Transaction
from .model import Employee, role_for_employee_id


class EmployeeRepository:
    def __init__(self, tx: Transaction, *, manager_ids: Tuple[int, int] = MANAGER_ID_RANGE):
        self._tx = tx
        self._manager_ids = manager_ids

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        r = self._tx.get(EMPLOYEES.name, (employee_id,))
        if not r:
            return None
        employee_id = int(r["employee_id"])
        return Employee(
            employee_id=employee_id,
            name=r["name"],
            credential_hash=r["credential_hash"],
            role=role_for_employee_id(employee_id, self._manager_ids),
        )

    def require(self, employee_id: int) -> Employee:
        employee = self.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee
