from __future__ import annotations

import mysql.connector
import pytest

from src.jinji_system.jinji_system.core.exceptions import StoreFailure, ValidationError
from src.jinji_system.jinji_system.database.mysql_base import db_cursor


class FakeCursor:
    def close(self):
        pass


class FakeConnection:
    def __init__(self, commit_error=None):
        self.commit_error = commit_error
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor()

    def start_transaction(self, isolation_level=None):
        pass

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_with_transaction_commits_result(store, seed_employee):
    seed_employee(12345)

    def write(tx):
        tx.upsert("evaluation_records", (12345, "202406"), {"employee_comment": "Goals"})
        return "done"

    assert store.with_transaction(write) == "done"
    assert store.rows("evaluation_records")[(12345, "202406")]["employee_comment"] == "Goals"


def test_with_transaction_discards_partial_work(store, seed_employee):
    seed_employee(12345)

    def write_then_fail(tx):
        tx.upsert("evaluation_records", (12345, "202406"), {"employee_comment": "Goals"})
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        store.with_transaction(write_then_fail)
    assert store.rows("evaluation_records") == {}


def test_unknown_column_is_rejected(store, seed_employee):
    seed_employee(12345)

    with pytest.raises(ValueError):
        store.with_transaction(lambda tx: tx.upsert("evaluation_records", (12345, "202406"), {"bogus": 1}))


def test_constraint_violation_is_a_validation_error():
    conn = FakeConnection(commit_error=mysql.connector.IntegrityError(msg="foreign key constraint fails", errno=1452))

    with pytest.raises(ValidationError) as exc:
        with db_cursor(FakeConnectionFactory(conn)):
            pass

    assert not isinstance(exc.value, StoreFailure)
    assert conn.rolled_back and conn.closed


def test_other_driver_errors_are_retryable_store_failures():
    conn = FakeConnection(commit_error=mysql.connector.OperationalError(msg="Lock wait timeout exceeded", errno=1205))

    with pytest.raises(StoreFailure) as exc:
        with db_cursor(FakeConnectionFactory(conn)):
            pass

    assert exc.value.retryable is True
    assert conn.rolled_back and conn.closed


def test_clean_exit_commits():
    conn = FakeConnection()

    with db_cursor(FakeConnectionFactory(conn)):
        pass

    assert conn.committed and not conn.rolled_back and conn.closed
