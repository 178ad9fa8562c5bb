from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.year_month import YearMonth
from ..database.store import EVALUATION_RECORDS, Row, Transaction
from .model import EvaluationRecord

_COLUMN_FOR_FIELD = {
    "comment": "employee_comment",
    "skill_score": "skill_score",
    "behavior_score": "behavior_score",
    "attitude_score": "attitude_score",
    "manager_comment": "manager_comment",
}


def _optional_int(value) -> Optional[int]:
    return int(value) if value is not None else None


def _to_record(r: Row) -> EvaluationRecord:
    return EvaluationRecord(
        employee_id=int(r["employee_id"]),
        year_month=YearMonth.parse(str(r["target_month"])),
        comment=r.get("employee_comment"),
        skill_score=_optional_int(r.get("skill_score")),
        behavior_score=_optional_int(r.get("behavior_score")),
        attitude_score=_optional_int(r.get("attitude_score")),
        manager_comment=r.get("manager_comment"),
    )


class EvaluationRepository:
    def __init__(self, tx: Transaction):
        self._tx = tx

    def get(self, employee_id: int, year_month: YearMonth) -> Optional[EvaluationRecord]:
        r = self._tx.get(EVALUATION_RECORDS.name, (employee_id, str(year_month)))
        return _to_record(r) if r else None

    def upsert_fields(self, employee_id: int, year_month: YearMonth, fields: Dict[str, Any]) -> None:
        """Write only ``fields``; columns not named keep their stored values."""
        self._tx.upsert(
            EVALUATION_RECORDS.name,
            (employee_id, str(year_month)),
            {_COLUMN_FOR_FIELD[name]: value for name, value in fields.items()},
        )
