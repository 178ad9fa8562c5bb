from __future__ import annotations

from flask import Flask, session

from ..common.http import json_body, ok
from ..common.session import current_caller, login_required, store_login
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_employee = container.auth_service.authenticate(data.get("emplid"), data.get("password") or "")
        store_login(s_employee)
        return ok(
            {"emplid": s_employee.employee_id, "name": s_employee.name, "role": s_employee.role.value},
            message="Login successful",
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out")

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        caller = current_caller()
        return ok(
            {
                "emplid": caller.employee_id,
                "name": session.get("name"),
                "role": session.get("role"),
            }
        )
