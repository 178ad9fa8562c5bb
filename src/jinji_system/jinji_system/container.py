from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.service import AttendanceService
from .closing.policy import CalendarPolicy
from .common.datetime_utils import parse_hhmm
from .core import constants
from .core.enums import BasicSalarySource
from .database.connection import DatabaseConnection, DBConfig
from .database.store import MySQLStore, Store
from .employees.service import AuthService
from .evaluations.service import EvaluationService
from .payroll.calculator.standard_calculator import StandardOvertimeCalculator
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    store: Store
    policy: CalendarPolicy

    auth_service: AuthService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    evaluation_service: EvaluationService


def build_container(*, settings: Any, store: Optional[Store] = None) -> Container:
    """Wire services around one store.

    ``settings`` is a settings module (see ``config``); ``store`` overrides the
    MySQL store built from ``settings.DB_CONFIG``.
    """
    if store is None:
        store = MySQLStore(DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG"))))

    manager_ids = tuple(getattr(settings, "MANAGER_ID_RANGE", constants.MANAGER_ID_RANGE))
    policy = CalendarPolicy(
        buffer_days=int(getattr(settings, "SUBMISSION_BUFFER_DAYS", constants.DEFAULT_SUBMISSION_BUFFER_DAYS))
    )
    standard_end = parse_hhmm(getattr(settings, "STANDARD_END_OF_DAY", None), "STANDARD_END_OF_DAY")

    auth_service = AuthService(store, manager_ids=manager_ids)
    attendance_service = AttendanceService(store, policy=policy)
    payroll_service = PayrollService(
        store,
        calculator=StandardOvertimeCalculator(standard_end or constants.DEFAULT_STANDARD_END_OF_DAY),
        hourly_rate=int(getattr(settings, "OVERTIME_HOURLY_RATE", constants.DEFAULT_OVERTIME_HOURLY_RATE)),
        default_basic_salary=getattr(settings, "DEFAULT_BASIC_SALARY", None),
        basic_salary_source=BasicSalarySource(getattr(settings, "BASIC_SALARY_SOURCE", "previous_record")),
    )
    evaluation_service = EvaluationService(store)

    return Container(
        store=store,
        policy=policy,
        auth_service=auth_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        evaluation_service=evaluation_service,
    )
