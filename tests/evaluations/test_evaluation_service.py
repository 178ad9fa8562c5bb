from __future__ import annotations

import pytest

from src.jinji_system.jinji_system.common.year_month import YearMonth
from src.jinji_system.jinji_system.core.enums import EvaluationStage
from src.jinji_system.jinji_system.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.jinji_system.jinji_system.employees.model import AuthContext
from src.jinji_system.jinji_system.evaluations.service import EvaluationService

STAFF = AuthContext(employee_id=12345, is_manager=False)
OTHER_STAFF = AuthContext(employee_id=11111, is_manager=False)
MANAGER = AuthContext(employee_id=20001, is_manager=True)


@pytest.fixture(autouse=True)
def employees(seed_employee):
    seed_employee(12345)
    seed_employee(20001)


@pytest.fixture
def service(store):
    return EvaluationService(store)


def test_employee_creates_record_with_comment_only(store, service):
    record = service.upsert_evaluation(STAFF, 12345, "202406", comment="Ship the payroll rewrite")

    assert record.comment == "Ship the payroll rewrite"
    assert record.skill_score is None
    assert record.manager_comment is None
    assert record.stage == EvaluationStage.EMPLOYEE_ONLY
    row = store.rows("evaluation_records")[(12345, "202406")]
    assert row["skill_score"] is None and row["manager_comment"] is None


def test_manager_finalizes_without_touching_comment(service):
    service.upsert_evaluation(STAFF, 12345, "202406", comment="Goals")
    record = service.upsert_evaluation(
        MANAGER, 12345, "202406", skill_score=4, behavior_score=3, attitude_score=5, manager_comment="Solid"
    )

    assert record.comment == "Goals"
    assert (record.skill_score, record.behavior_score, record.attitude_score) == (4, 3, 5)
    assert record.stage == EvaluationStage.FINALIZED


def test_employee_cannot_change_manager_scores(service):
    service.upsert_evaluation(MANAGER, 12345, "202406", skill_score=2, manager_comment="Needs focus")

    record = service.upsert_evaluation(STAFF, 12345, "202406", comment="Updated goals", skill_score=4)

    assert record.skill_score == 2
    assert record.manager_comment == "Needs focus"
    assert record.comment == "Updated goals"


def test_manager_comment_for_someone_else_is_ignored(service):
    service.upsert_evaluation(STAFF, 12345, "202406", comment="Mine")

    record = service.upsert_evaluation(MANAGER, 12345, "202406", comment="Overwritten?", skill_score=3)

    assert record.comment == "Mine"
    assert record.skill_score == 3


def test_manager_writes_both_parts_of_own_record(service):
    record = service.upsert_evaluation(MANAGER, 20001, "202406", comment="Own goals", attitude_score=4)

    assert record.comment == "Own goals"
    assert record.attitude_score == 4


def test_omitted_fields_keep_stored_values(service):
    service.upsert_evaluation(MANAGER, 12345, "202406", skill_score=4, behavior_score=4, manager_comment="Good")

    record = service.upsert_evaluation(MANAGER, 12345, "202406", behavior_score=5)

    assert (record.skill_score, record.behavior_score, record.manager_comment) == (4, 5, "Good")


def test_manager_first_write_leaves_comment_unset(store, service):
    record = service.upsert_evaluation(MANAGER, 12345, "202406", skill_score=1)

    assert record.comment is None
    assert store.rows("evaluation_records")[(12345, "202406")]["employee_comment"] is None


def test_staff_cannot_write_other_employee(store, service):
    with pytest.raises(ForbiddenError) as exc:
        service.upsert_evaluation(OTHER_STAFF, 12345, "202406", comment="hello")

    assert "hello" not in str(exc.value)
    assert store.rows("evaluation_records") == {}


@pytest.mark.parametrize("score", [0, 6, "x", 3.5])
def test_scores_out_of_range_are_rejected(service, score):
    with pytest.raises(ValidationError):
        service.upsert_evaluation(MANAGER, 12345, "202406", skill_score=score)


def test_history_includes_previous_month(service):
    service.upsert_evaluation(STAFF, 12345, "202405", comment="May")
    service.upsert_evaluation(STAFF, 12345, "202406", comment="June")

    history = service.get_evaluation_with_history(12345, "202406")

    assert history.current.comment == "June"
    assert history.previous.comment == "May"
    assert history.previous.year_month == YearMonth(2024, 5)


def test_history_wraps_to_december(service):
    service.upsert_evaluation(STAFF, 12345, "202312", comment="December")

    history = service.get_evaluation_with_history(12345, "202401")

    assert history.current is None
    assert history.stage == EvaluationStage.ABSENT
    assert history.previous.comment == "December"


def test_history_without_previous_is_empty_not_error(service):
    service.upsert_evaluation(STAFF, 12345, "202406", comment="First")

    history = service.get_evaluation_with_history(12345, "202406", caller=STAFF)

    assert history.previous is None


def test_history_read_is_scoped(service):
    with pytest.raises(ForbiddenError):
        service.get_evaluation_with_history(12345, "202406", caller=OTHER_STAFF)


def test_out_of_scope_scores_are_dropped_before_validation(store, service):
    record = service.upsert_evaluation(STAFF, 12345, "202406", comment="Goals", skill_score=0, attitude_score=9)

    assert record.comment == "Goals"
    assert record.skill_score is None and record.attitude_score is None


def test_comment_must_be_text(service):
    with pytest.raises(ValidationError):
        service.upsert_evaluation(STAFF, 12345, "202406", comment=42)


def test_unknown_employee_is_not_found(store, service):
    with pytest.raises(NotFoundError):
        service.upsert_evaluation(MANAGER, 99999, "202406", skill_score=3)

    assert store.rows("evaluation_records") == {}
