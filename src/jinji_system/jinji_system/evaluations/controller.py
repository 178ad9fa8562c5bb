from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..common.session import current_caller, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/performance", methods=["POST"], endpoint="post_performance")
    @login_required
    def post_performance():
        data = json_body()
        if not data.get("month"):
            raise ValidationError("month (YYYYMM) is required")
        caller = current_caller()
        employee_id = data.get("emplid")
        record = container.evaluation_service.upsert_evaluation(
            caller,
            caller.employee_id if employee_id in (None, "") else employee_id,
            data["month"],
            comment=data.get("subordinate_input"),
            skill_score=data.get("supervisor_ability"),
            behavior_score=data.get("supervisor_behavior"),
            attitude_score=data.get("supervisor_attitude"),
            manager_comment=data.get("supervisor_input"),
        )
        return ok(record.to_dict(), message="Evaluation saved")

    @app.route("/performance/<int:employee_id>", methods=["GET"], endpoint="get_performance")
    @login_required
    def get_performance(employee_id: int):
        month = request.args.get("month")
        if not month:
            raise ValidationError("month (YYYYMM) is required")
        history = container.evaluation_service.get_evaluation_with_history(
            employee_id, month, caller=current_caller()
        )
        return ok(
            {
                "stage": history.stage.value,
                "current": history.current.to_dict() if history.current else None,
                "previous": history.previous.to_dict() if history.previous else None,
            }
        )
