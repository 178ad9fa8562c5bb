from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.year_month import YearMonth
from ..core.enums import EvaluationStage

# Which party may write which field.
EMPLOYEE_FIELDS = ("comment",)
MANAGER_FIELDS = ("skill_score", "behavior_score", "attitude_score", "manager_comment")


@dataclass(frozen=True)
class EvaluationRecord:
    employee_id: int
    year_month: YearMonth
    comment: Optional[str] = None
    skill_score: Optional[int] = None
    behavior_score: Optional[int] = None
    attitude_score: Optional[int] = None
    manager_comment: Optional[str] = None

    @property
    def stage(self) -> EvaluationStage:
        if any(getattr(self, f) is not None for f in MANAGER_FIELDS):
            return EvaluationStage.FINALIZED
        return EvaluationStage.EMPLOYEE_ONLY

    def to_dict(self) -> dict:
        return {
            "emplid": self.employee_id,
            "month": str(self.year_month),
            "subordinate_input": self.comment,
            "supervisor_ability": self.skill_score,
            "supervisor_behavior": self.behavior_score,
            "supervisor_attitude": self.attitude_score,
            "supervisor_input": self.manager_comment,
            "stage": self.stage.value,
        }


@dataclass(frozen=True)
class EvaluationHistory:
    """A month's evaluation plus the previous month's, either may be missing."""

    current: Optional[EvaluationRecord]
    previous: Optional[EvaluationRecord]

    @property
    def stage(self) -> EvaluationStage:
        return self.current.stage if self.current else EvaluationStage.ABSENT
