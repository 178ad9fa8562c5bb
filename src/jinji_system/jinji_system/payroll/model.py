from __future__ import annotations

from dataclasses import dataclass

from ..common.year_month import YearMonth
from .tax_schedule import Deductions


@dataclass(frozen=True)
class PayrollRecord:
    """One computed payslip.

    ``total_deduction`` and ``net_salary`` are derived from the stored
    components every time they are read; they are never persisted.
    """

    employee_id: int
    year_month: YearMonth
    basic_salary: int
    overtime_pay: int
    health: int
    nursing_care: int
    pension: int
    employment: int
    income_tax: int
    resident_tax: int

    @classmethod
    def compute(cls, employee_id: int, year_month: YearMonth, *, basic_salary: int, overtime_pay: int, deductions: Deductions) -> "PayrollRecord":
        return cls(
            employee_id=employee_id,
            year_month=year_month,
            basic_salary=basic_salary,
            overtime_pay=overtime_pay,
            health=deductions.health,
            nursing_care=deductions.nursing_care,
            pension=deductions.pension,
            employment=deductions.employment,
            income_tax=deductions.income_tax,
            resident_tax=deductions.resident_tax,
        )

    @property
    def total_deduction(self) -> int:
        return (
            self.health
            + self.nursing_care
            + self.pension
            + self.employment
            + self.income_tax
            + self.resident_tax
        )

    @property
    def net_salary(self) -> int:
        return self.basic_salary + self.overtime_pay - self.total_deduction

    def to_dict(self) -> dict:
        return {
            "basic_salary": self.basic_salary,
            "overtime_allowance": self.overtime_pay,
            "health_insurance": self.health,
            "nursing_care_insurance": self.nursing_care,
            "pension": self.pension,
            "employment_insurance": self.employment,
            "income_tax": self.income_tax,
            "resident_tax": self.resident_tax,
        }
