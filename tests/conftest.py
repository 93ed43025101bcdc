"""Pytest fixtures for simplecrud tests.

The repositories are exercised against SQLite through a small connection
stand-in that speaks the subset of the mysql.connector API the code uses:
%s placeholders, dictionary cursors, rowcount/lastrowid, commit/close, and
mysql.connector error classes.
"""

import sqlite3
from decimal import Decimal

import mysql.connector
import pytest

from config import DEFAULTS
from db import Database
from product_repo import ProductRepository
from user_repo import UserRepository

sqlite3.register_adapter(Decimal, str)

SQLITE_SCHEMA = """
CREATE TABLE Products (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    Name TEXT NOT NULL,
    Price DECIMAL(10, 2) NOT NULL
);
CREATE TABLE Users (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    Username TEXT NOT NULL UNIQUE,
    Password TEXT NOT NULL
);
"""


class SqliteCursor:
    def __init__(self, cursor):
        self._cur = cursor

    def execute(self, sql, params=()):
        try:
            self._cur.execute(sql.replace("%s", "?"), params)
        except sqlite3.IntegrityError as e:
            raise mysql.connector.IntegrityError(msg=str(e), errno=1062)
        except sqlite3.Error as e:
            raise mysql.connector.DatabaseError(msg=str(e))

    def fetchone(self):
        row = self._cur.fetchone()
        return dict(row) if row is not None else None

    def fetchall(self):
        return [dict(row) for row in self._cur.fetchall()]

    @property
    def rowcount(self):
        return self._cur.rowcount

    @property
    def lastrowid(self):
        return self._cur.lastrowid

    def close(self):
        self._cur.close()


class SqliteConnection:
    def __init__(self, path, tracker):
        self._conn = sqlite3.connect(path)
        self._conn.row_factory = sqlite3.Row
        self._tracker = tracker
        tracker.opened += 1

    def cursor(self, dictionary=False, buffered=False):
        return SqliteCursor(self._conn.cursor())

    def commit(self):
        self._conn.commit()

    def close(self):
        self._tracker.closed += 1
        self._conn.close()


class ConnectionTracker:
    """Stand-in for mysql.connector.connect that records open/close calls."""

    def __init__(self, path):
        self.path = path
        self.opened = 0
        self.closed = 0
        self.last_kwargs = None

    def __call__(self, **kwargs):
        self.last_kwargs = kwargs
        return SqliteConnection(self.path, self)


@pytest.fixture
def settings():
    return dict(DEFAULTS)


def make_store(path, schema=SQLITE_SCHEMA):
    conn = sqlite3.connect(path)
    conn.executescript(schema)
    conn.close()
    return ConnectionTracker(path)


@pytest.fixture
def connect(tmp_path):
    return make_store(str(tmp_path / "test.db"))


@pytest.fixture
def db(settings, connect):
    return Database(settings, connect=connect)


@pytest.fixture
def unreachable_db(settings):
    def refuse(**kwargs):
        raise mysql.connector.errors.InterfaceError(msg="Can't connect to MySQL server on 'localhost:3306'", errno=2003)
    return Database(settings, connect=refuse)


@pytest.fixture
def products(db):
    return ProductRepository(db)


@pytest.fixture
def users(db):
    return UserRepository(db, hash_passwords=True, rounds=4)


@pytest.fixture
def plain_users(db):
    return UserRepository(db, hash_passwords=False)


@pytest.fixture
def nocase_users(settings, tmp_path):
    """Users table that compares usernames ignoring case, like MySQL's default collation."""
    schema = SQLITE_SCHEMA.replace("Username TEXT NOT NULL UNIQUE", "Username TEXT NOT NULL UNIQUE COLLATE NOCASE")
    store = make_store(str(tmp_path / "nocase.db"), schema)
    return UserRepository(Database(settings, connect=store), hash_passwords=True, rounds=4)
