from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import json_body, ok
from ..common.session import current_caller, login_required, resolve_target
from ..common.year_month import YearMonth
from ..container import Container
from ..core.enums import DayKind


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["PUT"], endpoint="put_attendance")
    @login_required
    def put_attendance():
        data = json_body()
        employee_id = resolve_target(current_caller(), data.get("emplid"))
        day = container.attendance_service.record_day(
            employee_id,
            data.get("date") or "",
            DayKind.ATTENDANCE,
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
        )
        return ok(day.to_dict(), message="Attendance saved")

    @app.route("/leave", methods=["PUT"], endpoint="put_leave")
    @login_required
    def put_leave():
        data = json_body()
        employee_id = resolve_target(current_caller(), data.get("emplid"))
        day = container.attendance_service.record_day(
            employee_id,
            data.get("date") or "",
            DayKind.LEAVE,
            leave_type=data.get("leave_type"),
        )
        return ok(day.to_dict(), message="Leave saved")

    @app.route("/attendance/<int:employee_id>", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance(employee_id: int):
        current_caller().require_access(employee_id)
        month = YearMonth.parse(request.args.get("month") or YearMonth.of(now_local().date()))
        days = container.attendance_service.list_days(employee_id, month)
        return ok(
            {
                "attendance": [d.to_dict() for d in days.attendance_days],
                "leave": [d.to_dict() for d in days.leave_days],
            },
            month=str(month),
        )
