from __future__ import annotations

import logging
from typing import Optional, Union

from ..common.validators import optional_score, optional_text, require_employee_id
from ..common.year_month import YearMonth
from ..database.store import Store
from ..employees.model import AuthContext
from ..employees.repository import EmployeeRepository
from .model import EMPLOYEE_FIELDS, MANAGER_FIELDS, EvaluationHistory, EvaluationRecord
from .repository import EvaluationRepository

logger = logging.getLogger(__name__)

_FIELD_CHECKS = {
    "comment": (optional_text, "Comment"),
    "skill_score": (optional_score, "Skill score"),
    "behavior_score": (optional_score, "Behavior score"),
    "attitude_score": (optional_score, "Attitude score"),
    "manager_comment": (optional_text, "Manager comment"),
}


class EvaluationService:
    """Performance evaluations with field-level write scoping.

    The employee writes ``comment`` on their own record; managers write the
    three scores and ``manager_comment``. A submission only ever touches the
    fields its caller may set, so neither party can blank the other's input.
    Fields outside the caller's scope are dropped without error.
    """

    def __init__(self, store: Store):
        self._store = store

    @staticmethod
    def _writable_fields(caller: AuthContext, employee_id: int) -> tuple:
        fields: tuple = ()
        if caller.employee_id == employee_id:
            fields += EMPLOYEE_FIELDS
        if caller.is_manager:
            fields += MANAGER_FIELDS
        return fields

    def upsert_evaluation(
        self,
        caller: AuthContext,
        employee_id: int,
        year_month: Union[str, YearMonth],
        *,
        comment: Optional[str] = None,
        skill_score: Optional[int] = None,
        behavior_score: Optional[int] = None,
        attitude_score: Optional[int] = None,
        manager_comment: Optional[str] = None,
    ) -> EvaluationRecord:
        employee_id = require_employee_id(employee_id)
        ym = YearMonth.parse(year_month)
        caller.require_access(employee_id)

        submitted = {
            "comment": comment,
            "skill_score": skill_score,
            "behavior_score": behavior_score,
            "attitude_score": attitude_score,
            "manager_comment": manager_comment,
        }
        writable = self._writable_fields(caller, employee_id)
        dropped = sorted(k for k, v in submitted.items() if v is not None and k not in writable)
        if dropped:
            logger.debug("employee %s may not set %s on %s/%s; ignored", caller.employee_id, dropped, employee_id, ym)

        fields = {}
        for name in writable:
            check, label = _FIELD_CHECKS[name]
            value = check(submitted[name], label)
            if value is not None:
                fields[name] = value

        with self._store.transaction() as tx:
            EmployeeRepository(tx).require(employee_id)
            evaluations = EvaluationRepository(tx)
            evaluations.upsert_fields(employee_id, ym, fields)
            record = evaluations.get(employee_id, ym)

        logger.info(
            "evaluation %s/%s updated by employee %s (%s)",
            employee_id,
            ym,
            caller.employee_id,
            ", ".join(sorted(fields)) or "no fields",
        )
        return record

    def get_evaluation_with_history(
        self,
        employee_id: int,
        year_month: Union[str, YearMonth],
        *,
        caller: Optional[AuthContext] = None,
    ) -> EvaluationHistory:
        employee_id = require_employee_id(employee_id)
        if caller is not None:
            caller.require_access(employee_id)
        ym = YearMonth.parse(year_month)

        with self._store.transaction() as tx:
            evaluations = EvaluationRepository(tx)
            return EvaluationHistory(
                current=evaluations.get(employee_id, ym),
                previous=evaluations.get(employee_id, ym.previous()),
            )
