"""
SQLite database handle and simple migration system.

The ``Database`` class owns a single SQLite connection for the
lifetime of the application.  ``create_app`` opens it at startup,
stores it on ``app.state.db`` and closes it at shutdown; routes
receive it through the ``get_db`` dependency.  Every unit of work
runs inside ``Database.transaction()``, which serialises access to
the connection and commits or rolls back as a whole.

Migrations are kept in the ``MIGRATIONS`` list.  Applied versions are
recorded in the ``migrations`` table and new ones are executed in
order by ``Database.init_db``.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT,
            attendees_total INTEGER NOT NULL DEFAULT 0,
            date TIMESTAMP NOT NULL,
            type TEXT NOT NULL CHECK (type IN ('Conference', 'Workshop', 'Meetup')),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS attendees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            event_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(event_id, email)
        );
        """,
    ),
    # Migration 2: lookups by event and by type
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_attendees_event_id ON attendees(event_id);
        CREATE INDEX IF NOT EXISTS idx_events_type ON events(type);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged; relative
    paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Explicit handle over the SQLite store."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def open(self) -> None:
        """Open the connection.  Calling ``open`` twice is a no-op."""
        if self._conn is not None:
            return
        # The connection is shared between the event loop and the
        # worker threads used by the test client; ``_lock`` guards it.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("Opened database %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        with self._lock:
            self._conn.close()
            self._conn = None
        logger.info("Closed database %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on any error."""
        if self._conn is None:
            raise RuntimeError("Database is not open")
        with self._lock:
            cursor = self._conn.cursor()
            try:
                yield cursor
                self._conn.commit()
            except BaseException:
                self._conn.rollback()
                raise
            finally:
                cursor.close()

    def init_db(self) -> int:
        """Apply pending migrations and return the resulting schema version."""
        with self.transaction() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
        return current_version


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    return request.app.state.db
