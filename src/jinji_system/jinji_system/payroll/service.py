from __future__ import annotations

import logging
from typing import List, Optional, Union

from ..attendance.repository import DayRepository
from ..common.validators import require_employee_id
from ..common.year_month import YearMonth
from ..core.constants import DEFAULT_OVERTIME_HOURLY_RATE
from ..core.enums import BasicSalarySource
from ..core.exceptions import NotFoundError
from ..database.store import Store
from ..employees.model import AuthContext
from ..employees.repository import EmployeeRepository
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import PayrollRecord
from .repository import PayrollRepository
from .tax_schedule import deductions

logger = logging.getLogger(__name__)


class PayrollService:
    """Derives a month's payroll record from attendance and the tax schedule.

    Re-running a month overwrites the stored record with freshly computed
    values; identical inputs always produce identical records.
    """

    def __init__(
        self,
        store: Store,
        *,
        calculator: Optional[OvertimeCalculator] = None,
        hourly_rate: int = DEFAULT_OVERTIME_HOURLY_RATE,
        default_basic_salary: Optional[int] = None,
        basic_salary_source: BasicSalarySource = BasicSalarySource.PREVIOUS_RECORD,
    ):
        self._store = store
        self._calculator = calculator or StandardOvertimeCalculator()
        self._hourly_rate = int(hourly_rate)
        self._default_basic_salary = default_basic_salary
        self._source = BasicSalarySource(basic_salary_source)

    def _resolve_basic_salary(self, payroll: PayrollRepository, employee_id: int, ym: YearMonth) -> int:
        if self._source is BasicSalarySource.CURRENT_RECORD:
            current = payroll.get(employee_id, ym)
            if current:
                return current.basic_salary
        if self._source is not BasicSalarySource.DEFAULT:
            previous = payroll.latest_before(employee_id, ym)
            if previous:
                return previous.basic_salary

        if self._default_basic_salary is None:
            raise NotFoundError(f"No basic salary on record for employee {employee_id} for {ym}")
        return int(self._default_basic_salary)

    def run_payroll(
        self,
        employee_id: int,
        year_month: Union[str, YearMonth],
        *,
        basic_salary: Optional[int] = None,
    ) -> PayrollRecord:
        """Compute and store the month's record.

        ``basic_salary`` overrides the configured source; later months pick it
        up from this record.
        """
        employee_id = require_employee_id(employee_id)
        ym = YearMonth.parse(year_month)

        with self._store.transaction() as tx:
            EmployeeRepository(tx).require(employee_id)
            payroll = PayrollRepository(tx)
            if basic_salary is None:
                basic_salary = self._resolve_basic_salary(payroll, employee_id, ym)

            worked = DayRepository(tx).list_attendance(employee_id, ym.first_day, ym.last_day)
            overtime_hours = self._calculator.total_overtime_minutes(worked) // 60

            record = PayrollRecord.compute(
                employee_id,
                ym,
                basic_salary=basic_salary,
                overtime_pay=overtime_hours * self._hourly_rate,
                deductions=deductions(basic_salary),
            )
            payroll.upsert(record)

        logger.info(
            "payroll computed for employee %s %s (%d worked days, %d overtime hours)",
            employee_id,
            ym,
            len(worked),
            overtime_hours,
        )
        return record

    def get_salary(
        self,
        employee_id: int,
        year_month: Union[str, YearMonth],
        *,
        caller: Optional[AuthContext] = None,
    ) -> Optional[PayrollRecord]:
        employee_id = require_employee_id(employee_id)
        if caller is not None:
            caller.require_access(employee_id)
        ym = YearMonth.parse(year_month)

        with self._store.transaction() as tx:
            return PayrollRepository(tx).get(employee_id, ym)

    def get_salaries(self, employee_id: int, *, caller: Optional[AuthContext] = None) -> List[PayrollRecord]:
        employee_id = require_employee_id(employee_id)
        if caller is not None:
            caller.require_access(employee_id)

        return self._store.with_transaction(lambda tx: PayrollRepository(tx).list_for_employee(employee_id))
