"""Monthly deductions derived from the basic salary.

Insurance premiums are flat shares of the monthly basic salary. Income tax
uses one rate picked from the annualized salary (first bracket whose upper
bound is not exceeded); resident tax is flat. Every amount is truncated to a
whole currency unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from ..core.exceptions import ValidationError

HEALTH_RATE = Decimal("0.05")
NURSING_CARE_RATE = Decimal("0.018")
PENSION_RATE = Decimal("0.0915")
EMPLOYMENT_RATE = Decimal("0.005")
RESIDENT_TAX_RATE = Decimal("0.10")

# (inclusive annual upper bound, rate), ascending
INCOME_TAX_BRACKETS = (
    (1_950_000, Decimal("0.05")),
    (3_300_000, Decimal("0.10")),
    (6_950_000, Decimal("0.20")),
    (9_000_000, Decimal("0.23")),
    (18_000_000, Decimal("0.33")),
    (40_000_000, Decimal("0.40")),
)
TOP_INCOME_TAX_RATE = Decimal("0.45")


@dataclass(frozen=True)
class Deductions:
    health: int
    nursing_care: int
    pension: int
    employment: int
    income_tax: int
    resident_tax: int

    @property
    def total(self) -> int:
        return (
            self.health
            + self.nursing_care
            + self.pension
            + self.employment
            + self.income_tax
            + self.resident_tax
        )


def _truncate(amount: Decimal) -> int:
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))


def income_tax_rate(annual_salary: int) -> Decimal:
    for upper, rate in INCOME_TAX_BRACKETS:
        if annual_salary <= upper:
            return rate
    return TOP_INCOME_TAX_RATE


def deductions(basic_salary: int) -> Deductions:
    if isinstance(basic_salary, bool) or not isinstance(basic_salary, int):
        raise ValidationError("Basic salary must be an integer amount")
    if basic_salary < 0:
        raise ValidationError("Basic salary must not be negative")

    base = Decimal(basic_salary)
    rate = income_tax_rate(basic_salary * 12)
    return Deductions(
        health=_truncate(base * HEALTH_RATE),
        nursing_care=_truncate(base * NURSING_CARE_RATE),
        pension=_truncate(base * PENSION_RATE),
        employment=_truncate(base * EMPLOYMENT_RATE),
        income_tax=_truncate(base * rate),
        resident_tax=_truncate(base * RESIDENT_TAX_RATE),
    )
