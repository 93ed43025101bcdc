from contextlib import contextmanager

import mysql.connector
from mysql.connector.constants import ClientFlag

from errors import DatabaseConnectionError
from logging_config import get_logger
from models import ErrorKind, Result

logger = get_logger(__name__)

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS Products (
        Id INT AUTO_INCREMENT PRIMARY KEY,
        Name VARCHAR(255) NOT NULL,
        Price DECIMAL(10, 2) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Users (
        Id INT AUTO_INCREMENT PRIMARY KEY,
        Username VARCHAR(50) NOT NULL UNIQUE,
        Password VARCHAR(255) NOT NULL
    )
    """,
]


class Database:
    """
    Hands out a fresh connection per call and runs single statements on it.
    No pooling: every operation opens, uses and closes its own connection.
    """

    def __init__(self, settings, connect=mysql.connector.connect):
        self.settings = settings
        self._connect = connect

    @property
    def host(self):
        return f"{self.settings['DB_HOST']}:{self.settings['DB_PORT']}"

    def acquire(self):
        try:
            return self._connect(
                host=self.settings['DB_HOST'],
                port=self.settings['DB_PORT'],
                user=self.settings['DB_USER'],
                password=self.settings['DB_PASSWORD'],
                database=self.settings['DB_NAME'],
                connection_timeout=self.settings['DB_CONNECT_TIMEOUT'],
                # UPDATE reports matched rows, not changed rows
                client_flags=[ClientFlag.FOUND_ROWS],
            )
        except mysql.connector.Error as e:
            logger.error(f"Connection to {self.host}/{self.settings['DB_NAME']} failed: {e}")
            raise DatabaseConnectionError(self.host, self.settings['DB_NAME'], str(e)) from e

    @contextmanager
    def connection(self):
        conn = self.acquire()
        try:
            yield conn
        finally:
            conn.close()

    def _run(self, sql, params, handle, empty=None):
        try:
            with self.connection() as conn:
                cur = conn.cursor(dictionary=True, buffered=True)
                try:
                    cur.execute(sql, params)
                    return handle(conn, cur)
                finally:
                    cur.close()
        except DatabaseConnectionError as e:
            return Result.failure(ErrorKind.CONNECTION, str(e), empty)
        except mysql.connector.IntegrityError as e:
            logger.warning(f"Constraint violated: {e}")
            return Result.failure(ErrorKind.CONSTRAINT, str(e), empty)
        except mysql.connector.Error as e:
            logger.error(f"Statement failed: {e}")
            return Result.failure(ErrorKind.STATEMENT, str(e), empty)

    # --------- QUERY HELPERS ----------
    def fetch_all(self, sql, params=(), mapper=dict):
        def handle(conn, cur):
            return Result.success([mapper(row) for row in cur.fetchall()])
        return self._run(sql, params, handle, empty=[])

    def fetch_one(self, sql, params=(), mapper=dict, missing="No matching row"):
        def handle(conn, cur):
            row = cur.fetchone()
            if row is None:
                logger.info(missing)
                return Result.failure(ErrorKind.NOT_FOUND, missing)
            return Result.success(mapper(row))
        return self._run(sql, params, handle)

    def execute(self, sql, params=(), missing=None, insert=False):
        """
        Run one write statement and commit it.
        The result value is the new row id when `insert` is set, else the affected row count.
        When `missing` is given, zero affected rows is reported as NOT_FOUND.
        """
        def handle(conn, cur):
            conn.commit()
            if missing is not None and cur.rowcount == 0:
                logger.info(missing)
                return Result.failure(ErrorKind.NOT_FOUND, missing)
            if insert:
                return Result.success(cur.lastrowid)
            return Result.success(cur.rowcount)
        return self._run(sql, params, handle)

    # --------- SCHEMA ----------
    def init_schema(self):
        for statement in SCHEMA:
            result = self.execute(statement)
            if not result:
                return result
        logger.info("Database schema ready")
        return Result.success()
