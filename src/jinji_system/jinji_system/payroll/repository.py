from __future__ import annotations

from typing import List, Optional

from ..common.year_month import YearMonth
from ..database.store import PAYROLL_RECORDS, Row, Transaction
from .model import PayrollRecord


def _to_record(r: Row) -> PayrollRecord:
    return PayrollRecord(
        employee_id=int(r["employee_id"]),
        year_month=YearMonth.parse(str(r["target_month"])),
        basic_salary=int(r["basic_salary"]),
        overtime_pay=int(r["overtime_pay"]),
        health=int(r["health_insurance"]),
        nursing_care=int(r["nursing_care_insurance"]),
        pension=int(r["pension"]),
        employment=int(r["employment_insurance"]),
        income_tax=int(r["income_tax"]),
        resident_tax=int(r["resident_tax"]),
    )


class PayrollRepository:
    def __init__(self, tx: Transaction):
        self._tx = tx

    def get(self, employee_id: int, year_month: YearMonth) -> Optional[PayrollRecord]:
        r = self._tx.get(PAYROLL_RECORDS.name, (employee_id, str(year_month)))
        return _to_record(r) if r else None

    def latest_before(self, employee_id: int, year_month: YearMonth) -> Optional[PayrollRecord]:
        rows = self._tx.query(
            PAYROLL_RECORDS.name,
            (employee_id,),
            before=str(year_month),
            order_by="target_month",
            descending=True,
            limit=1,
        )
        return _to_record(rows[0]) if rows else None

    def list_for_employee(self, employee_id: int) -> List[PayrollRecord]:
        rows = self._tx.query(PAYROLL_RECORDS.name, (employee_id,), order_by="target_month")
        return [_to_record(r) for r in rows]

    def upsert(self, record: PayrollRecord) -> None:
        self._tx.upsert(
            PAYROLL_RECORDS.name,
            (record.employee_id, str(record.year_month)),
            {
                "basic_salary": record.basic_salary,
                "overtime_pay": record.overtime_pay,
                "health_insurance": record.health,
                "nursing_care_insurance": record.nursing_care,
                "pension": record.pension,
                "employment_insurance": record.employment,
                "income_tax": record.income_tax,
                "resident_tax": record.resident_tax,
            },
        )
