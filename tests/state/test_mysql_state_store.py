from __future__ import annotations

import json
from datetime import datetime

import mysql.connector
import pytest

from src.earnings_ticker.earnings_ticker.core.exceptions import StoreError
from src.earnings_ticker.earnings_ticker.shifts.model import ShiftConfig
from src.earnings_ticker.earnings_ticker.state.model import StoredTicker
from src.earnings_ticker.earnings_ticker.state.mysql_state_store import MySQLStateStore

CONFIG = ShiftConfig(
    annual_salary=47000,
    currency="USD",
    days_actively_working=235,
    start=datetime(2026, 2, 2, 9, 0),
    end=datetime(2026, 2, 2, 17, 0),
)


class FakeCursor:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self._rows: list[dict] = []

    def execute(self, sql: str, params=()):
        statement = " ".join(sql.split())
        if statement.startswith("SELECT state_key, state_value FROM ticker_state"):
            self._rows = [{"state_key": k, "state_value": v} for k, v in self._table.items() if k in params]
        elif statement.startswith("INSERT INTO ticker_state"):
            key, value = params
            self._table[key] = value
        else:
            raise AssertionError(f"unexpected SQL: {statement}")

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self.committed = False

    def cursor(self, dictionary: bool = False):
        return FakeCursor(self._table)

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, *, fail: bool = False):
        self.table: dict[str, str] = {}
        self.fail = fail

    def connect(self):
        if self.fail:
            raise mysql.connector.errors.InterfaceError("Can't connect to MySQL server")
        return FakeConnection(self.table)


def test_round_trip_active_config():
    factory = FakeConnectionFactory()
    store = MySQLStateStore(factory)

    store.save(CONFIG, active=True)
    loaded = store.load()

    assert json.loads(factory.table["active"]) is True
    assert loaded.active is True
    assert loaded.to_config(days_actively_working=235) == CONFIG


def test_deactivate_keeps_config_rows():
    factory = FakeConnectionFactory()
    store = MySQLStateStore(factory)

    store.save(CONFIG, active=True)
    store.save(None, active=False)
    loaded = store.load()

    assert loaded.active is False
    assert loaded.annual_salary == 47000
    assert loaded.start == CONFIG.start and loaded.end == CONFIG.end


def test_load_reads_legacy_utc_timestamps():
    factory = FakeConnectionFactory()
    factory.table.update(
        {
            "annualSalary": "52000",
            "startTime": json.dumps("2026-02-02T14:00:00.000Z"),
            "endTime": json.dumps("2026-02-02T22:00:00.000Z"),
        }
    )

    loaded = MySQLStateStore(factory).load()

    assert loaded.annual_salary == 52000.0
    assert loaded.end - loaded.start == CONFIG.end - CONFIG.start
    assert loaded.start.tzinfo is None
    assert loaded.active is False


def test_load_never_raises_on_connection_failure():
    store = MySQLStateStore(FakeConnectionFactory(fail=True))
    assert store.load() == StoredTicker()


def test_save_failure_is_store_error():
    store = MySQLStateStore(FakeConnectionFactory(fail=True))
    with pytest.raises(StoreError):
        store.save(CONFIG, active=True)
