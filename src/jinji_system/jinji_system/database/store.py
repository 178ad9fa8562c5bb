from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone

T = TypeVar("T")

Key = Tuple[Any, ...]
Row = Dict[str, Any]


@dataclass(frozen=True)
class Table:
    name: str
    key: Tuple[str, ...]
    columns: Tuple[str, ...]

    def key_dict(self, key: Sequence[Any]) -> Row:
        if len(key) != len(self.key):
            raise ValueError(f"{self.name}: expected key {self.key}, got {tuple(key)!r}")
        return dict(zip(self.key, key))

    def check_fields(self, fields: Row) -> None:
        unknown = set(fields) - set(self.columns)
        if unknown:
            raise ValueError(f"{self.name}: unknown columns {sorted(unknown)}")

    def check_prefix(self, prefix: Sequence[Any]) -> None:
        if len(prefix) >= len(self.key):
            raise ValueError(f"{self.name}: prefix must be shorter than key {self.key}")

    def check_order(self, order_by: Optional[str]) -> None:
        if order_by is not None and order_by not in self.key + self.columns:
            raise ValueError(f"{self.name}: cannot order by {order_by!r}")


EMPLOYEES = Table("employees", ("employee_id",), ("name", "credential_hash"))
ATTENDANCE_DAYS = Table("attendance_days", ("employee_id", "work_date"), ("start_time", "end_time"))
LEAVE_DAYS = Table("leave_days", ("employee_id", "work_date"), ("leave_type",))
PAYROLL_RECORDS = Table(
    "payroll_records",
    ("employee_id", "target_month"),
    (
        "basic_salary",
        "overtime_pay",
        "health_insurance",
        "nursing_care_insurance",
        "pension",
        "employment_insurance",
        "income_tax",
        "resident_tax",
    ),
)
EVALUATION_RECORDS = Table(
    "evaluation_records",
    ("employee_id", "target_month"),
    ("employee_comment", "skill_score", "behavior_score", "attitude_score", "manager_comment"),
)

TABLES: Dict[str, Table] = {
    t.name: t for t in (EMPLOYEES, ATTENDANCE_DAYS, LEAVE_DAYS, PAYROLL_RECORDS, EVALUATION_RECORDS)
}


def get_table(name: str) -> Table:
    try:
        return TABLES[name]
    except KeyError:
        raise ValueError(f"Unknown table: {name!r}")


class Transaction(ABC):
    """Transactional handle over the keyed record tables.

    ``query`` filters on a key prefix; ``between``/``before`` then bound the
    next key column (e.g. ``work_date`` after ``employee_id``).
    """

    @abstractmethod
    def get(self, table: str, key: Key) -> Optional[Row]:
        raise NotImplementedError

    @abstractmethod
    def upsert(self, table: str, key: Key, fields: Row) -> None:
        """Insert the row, or overwrite only ``fields`` when the key exists."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, table: str, key: Key) -> bool:
        raise NotImplementedError

    @abstractmethod
    def query(
        self,
        table: str,
        prefix: Key,
        *,
        between: Optional[Tuple[Any, Any]] = None,
        before: Any = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        raise NotImplementedError


class Store(ABC):
    """Owner of all persisted records; every unit of work is one transaction."""

    @abstractmethod
    def transaction(self):
        """Context manager yielding a Transaction; rolls back on any error."""
        raise NotImplementedError

    def with_transaction(self, fn: Callable[[Transaction], T]) -> T:
        with self.transaction() as tx:
            return fn(tx)


class MySQLTransaction(Transaction):
    def __init__(self, cur):
        self._cur = cur

    def get(self, table: str, key: Key) -> Optional[Row]:
        t = get_table(table)
        where = " AND ".join(f"{c}=%s" for c in t.key)
        self._cur.execute(
            f"SELECT {', '.join(t.key + t.columns)} FROM {t.name} WHERE {where}",
            tuple(t.key_dict(key).values()),
        )
        return fetchone(self._cur)

    def upsert(self, table: str, key: Key, fields: Row) -> None:
        t = get_table(table)
        t.check_fields(fields)
        row = {**t.key_dict(key), **fields}
        cols = list(row)
        placeholders = ", ".join(["%s"] * len(cols))
        if fields:
            updates = ", ".join(f"{c}=VALUES({c})" for c in fields)
        else:
            updates = f"{t.key[0]}={t.key[0]}"
        self._cur.execute(
            f"""
            INSERT INTO {t.name} ({', '.join(cols)})
            VALUES ({placeholders})
            ON DUPLICATE KEY UPDATE {updates}
            """,
            tuple(row.values()),
        )

    def delete(self, table: str, key: Key) -> bool:
        t = get_table(table)
        where = " AND ".join(f"{c}=%s" for c in t.key)
        self._cur.execute(f"DELETE FROM {t.name} WHERE {where}", tuple(t.key_dict(key).values()))
        return self._cur.rowcount > 0

    def query(
        self,
        table: str,
        prefix: Key,
        *,
        between: Optional[Tuple[Any, Any]] = None,
        before: Any = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        t = get_table(table)
        t.check_prefix(prefix)
        t.check_order(order_by)

        clauses = [f"{c}=%s" for c in t.key[: len(prefix)]]
        params: list[object] = list(prefix)
        bound = t.key[len(prefix)]
        if between is not None:
            clauses.append(f"{bound} BETWEEN %s AND %s")
            params.extend(between)
        if before is not None:
            clauses.append(f"{bound} < %s")
            params.append(before)

        sql = f"SELECT {', '.join(t.key + t.columns)} FROM {t.name}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        if order_by:
            sql += f" ORDER BY {order_by} {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        self._cur.execute(sql, tuple(params))
        return fetchall(self._cur)


class MySQLStore(Store):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            yield MySQLTransaction(cur)
