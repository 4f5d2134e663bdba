"""
db/connection.py
----------------
Opens the single database connection a SQL repository owns for its whole
lifetime. Two drivers are supported:

    - sqlite3 for an on-disk file (foreign keys switched on per connection)
    - psycopg2 for PostgreSQL

Queries are written with ``%s`` placeholders; `Database.sql` rewrites them
for the sqlite3 paramstyle.
"""

import sqlite3
from contextlib import closing, contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

import psycopg2
from psycopg2 import errors as pg_errors

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Database:
    """
    A DB-API connection plus the driver-specific details the repositories need.

    Attributes:
        connection: Open sqlite3 or psycopg2 connection.
        dialect: Either ``"sqlite"`` or ``"postgres"``.
        errors: The driver's base exception class.
    """
    connection: Any
    dialect: str
    errors: type

    def sql(self, query: str) -> str:
        """
        Adapt a ``%s``-style query to the driver's paramstyle.

        For SQLite every ``%s`` becomes ``?``, including any inside a string
        literal, so queries must pass literal text as parameters.
        """
        if self.dialect == "sqlite":
            return query.replace("%s", "?")
        return query

    def is_unique_violation(self, exc: Exception) -> bool:
        """True when `exc` is a uniqueness/primary-key constraint failure."""
        if self.dialect == "sqlite":
            return isinstance(exc, sqlite3.IntegrityError) and "UNIQUE constraint failed" in str(exc)
        return isinstance(exc, pg_errors.UniqueViolation)

    def close(self) -> None:
        self.connection.close()
        logger.info(f"Closed {self.dialect} connection.")


def open_sqlite(path: str) -> Database:
    """
    Open (or create) an SQLite database file.

    The connection may be used from any thread; callers serialize access.
    """
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.execute("PRAGMA foreign_keys = ON")
    logger.info(f"Opened SQLite database at {path}")
    return Database(connection=conn, dialect="sqlite", errors=sqlite3.Error)


def open_postgres(url: str) -> Database:
    """
    Connect to PostgreSQL.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(url)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise
    logger.info("PostgreSQL connection established.")
    return Database(connection=conn, dialect="postgres", errors=psycopg2.Error)


@contextmanager
def transaction(db: Database) -> Iterator[Any]:
    """
    Run a unit of work on one cursor.

    Commits when the block exits normally and rolls back on any exception,
    which is then re-raised.
    """
    conn = db.connection
    try:
        with closing(conn.cursor()) as cur:
            yield cur
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
