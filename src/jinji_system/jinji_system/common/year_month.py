from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Union

from ..core.exceptions import ValidationError
from .datetime_utils import last_day_of_month

_YEAR_MONTH_RE = re.compile(r"^(\d{4})-?(\d{2})$")


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month without a day component.

    Persisted and exchanged as ``YYYYMM``.
    """

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Invalid month: {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValidationError(f"Invalid year: {self.year}")

    @classmethod
    def parse(cls, value: Union[str, "YearMonth", date]) -> "YearMonth":
        """Accept ``YYYYMM`` or ``YYYY-MM``."""
        if isinstance(value, YearMonth):
            return value
        if isinstance(value, date):
            return cls.of(value)
        if not isinstance(value, str):
            raise ValidationError(f"Invalid month (YYYYMM): {value!r}")
        m = _YEAR_MONTH_RE.match(value.strip())
        if not m:
            raise ValidationError(f"Invalid month (YYYYMM): {value!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @classmethod
    def of(cls, d: date) -> "YearMonth":
        return cls(d.year, d.month)

    def previous(self) -> "YearMonth":
        if self.month == 1:
            return YearMonth(self.year - 1, 12)
        return YearMonth(self.year, self.month - 1)

    def next(self) -> "YearMonth":
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return last_day_of_month(self.year, self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}{self.month:02d}"
