from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..common.session import current_caller, login_required, manager_required
from ..common.validators import require_employee_id
from ..common.year_month import YearMonth
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import PayrollRecord


def _salary_view(record: PayrollRecord) -> dict:
    return {
        "emplid": record.employee_id,
        "month": str(record.year_month),
        "salary": record.to_dict(),
        "total_deductions": record.total_deduction,
        "take_home": record.net_salary,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/payroll/run", methods=["POST"], endpoint="run_payroll")
    @manager_required
    def run_payroll():
        data = json_body()
        if not data.get("month"):
            raise ValidationError("month (YYYYMM) is required")
        record = container.payroll_service.run_payroll(
            require_employee_id(data.get("emplid")),
            data["month"],
            basic_salary=data.get("basic_salary"),
        )
        return ok(_salary_view(record), message="Payroll computed")

    @app.route("/salary/<int:employee_id>", methods=["GET"], endpoint="get_salary")
    @login_required
    def get_salary(employee_id: int):
        month = request.args.get("month")
        if not month:
            raise ValidationError("month (YYYYMM) is required")
        ym = YearMonth.parse(month)
        record = container.payroll_service.get_salary(employee_id, ym, caller=current_caller())
        if record is None:
            raise NotFoundError(f"No salary record for {ym}")
        return ok(_salary_view(record))

    @app.route("/salary/<int:employee_id>/history", methods=["GET"], endpoint="salary_history")
    @login_required
    def salary_history(employee_id: int):
        records = container.payroll_service.get_salaries(employee_id, caller=current_caller())
        return ok([_salary_view(r) for r in records])
