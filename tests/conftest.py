"""Shared test fixtures."""

import sqlite3

import pytest

from pyduration import Duration
from pyduration.adapters.sql import register_sqlite


@pytest.fixture
def full_duration():
    return Duration(years=3, months=6, days=4, hours=12, minutes=30, seconds=5.5)


@pytest.fixture
def sqlite_conn():
    # register_sqlite() mutates process-wide sqlite3 state; undone on teardown
    register_sqlite()
    conn = sqlite3.connect(":memory:", detect_types=sqlite3.PARSE_DECLTYPES)
    conn.execute("CREATE TABLE jobs (id INTEGER PRIMARY KEY, timeout DURATION)")
    yield conn
    conn.close()
    sqlite3.converters.pop("DURATION", None)
    sqlite3.adapters.pop((Duration, sqlite3.PrepareProtocol), None)
