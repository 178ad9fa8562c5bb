from __future__ import annotations

import copy
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pytest
from werkzeug.security import generate_password_hash

from src.jinji_system.jinji_system.core.exceptions import StoreFailure, ValidationError
from src.jinji_system.jinji_system.database.store import TABLES, Row, Store, Transaction, get_table


class InMemoryTransaction(Transaction):
    def __init__(self, tables: Dict[str, Dict[tuple, Row]], *, fail_on_upsert: Optional[str] = None):
        self._tables = tables
        self._fail_on_upsert = fail_on_upsert

    def get(self, table: str, key) -> Optional[Row]:
        get_table(table)
        row = self._tables[table].get(tuple(key))
        return dict(row) if row else None

    def upsert(self, table: str, key, fields: Row) -> None:
        t = get_table(table)
        t.check_fields(fields)
        if table == self._fail_on_upsert:
            raise StoreFailure("simulated lock wait timeout")
        key = tuple(key)
        if table != "employees" and (key[0],) not in self._tables["employees"]:
            raise ValidationError("Unknown employee or invalid value for a stored field")
        existing = self._tables[table].get(key)
        if existing is not None:
            existing.update(fields)
            return
        row: Row = {c: None for c in t.columns}
        row.update(t.key_dict(key))
        row.update(fields)
        self._tables[table][key] = row

    def delete(self, table: str, key) -> bool:
        get_table(table)
        return self._tables[table].pop(tuple(key), None) is not None

    def query(self, table, prefix, *, between=None, before=None, order_by=None, descending=False, limit=None) -> List[Row]:
        t = get_table(table)
        t.check_prefix(prefix)
        t.check_order(order_by)
        bound = t.key[len(prefix)]

        rows = [dict(r) for k, r in self._tables[table].items() if k[: len(prefix)] == tuple(prefix)]
        if between is not None:
            rows = [r for r in rows if between[0] <= r[bound] <= between[1]]
        if before is not None:
            rows = [r for r in rows if r[bound] < before]
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        if limit is not None:
            rows = rows[: int(limit)]
        return rows


class InMemoryStore(Store):
    """Dict-backed store: each transaction works on a copy that replaces the data on commit."""

    def __init__(self):
        self.tables: Dict[str, Dict[tuple, Row]] = {name: {} for name in TABLES}
        self.fail_on_upsert: Optional[str] = None
        self.transactions = 0

    @contextmanager
    def transaction(self):
        working = copy.deepcopy(self.tables)
        yield InMemoryTransaction(working, fail_on_upsert=self.fail_on_upsert)
        self.tables = working
        self.transactions += 1

    def rows(self, table: str) -> Dict[tuple, Row]:
        return self.tables[table]

    def seed(self, table: str, key: Tuple[Any, ...], **fields) -> None:
        """Write directly, outside the transaction count."""
        InMemoryTransaction(self.tables).upsert(table, key, fields)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def seed_employee(store):
    def _seed(employee_id: int, name: str = "Employee", password: str = "secret123") -> None:
        store.seed("employees", (employee_id,), name=name, credential_hash=generate_password_hash(password))

    return _seed


@pytest.fixture
def june_now() -> datetime:
    return datetime(2024, 6, 12, 10, 0)
