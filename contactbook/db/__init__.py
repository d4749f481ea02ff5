"""Database module for ContactBook.

This module provides the Core API for database operations.

ARCHITECTURE:
- Database is the store handle. It is constructed once by the caller and
  injected into the Flask app (create_app(database=...)); there is no
  module-level connection.
- Database.core() opens a fresh connection and wraps it in a Core.
- Core is a context manager: commit on clean exit, rollback on exception,
  connection closed either way.
- Each record type gets an encapsulated operations class reached through a
  Core property (core.user, core.contact).

    database = Database("./data/contactbook.db")
    database.init()

    with database.core() as core:
        user_id = core.user.create("alice", password_hash)
        core.contact.create(user_id, "Bob", "bob@example.com", "555-0100")

Inside a request, handlers use get_core(), which resolves the Database
attached to the current app.
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from flask import current_app

from ..exceptions import DatabaseError

if TYPE_CHECKING:
    from .contact import ContactOperations
    from .user import UserOperations

logger = logging.getLogger(__name__)

# Key under which the Database handle is stored in app.extensions
EXTENSION_KEY = "contactbook.database"

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Database Core with record operations.

    Owns a single connection for the duration of a with-block.
    """

    def __init__(self, connection: sqlite3.Connection):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = connection
        self._user_ops = None
        self._contact_ops = None

    @property
    def user(self) -> "UserOperations":
        """User (credential store) operations, created on first access."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def contact(self) -> "ContactOperations":
        """Contact store operations, created on first access."""
        if self._contact_ops is None:
            from .contact import ContactOperations
            self._contact_ops = ContactOperations(self._conn)
        return self._contact_ops

    def __enter__(self) -> "Core":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Commit on success, roll back on exception, always close."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


class Database:
    """Handle on the SQLite file backing the users and contacts tables."""

    def __init__(self, path: str, timeout: float = 5.0):
        self.path = path
        self.timeout = timeout

    def connect(self) -> sqlite3.Connection:
        """Create a fresh database connection.

        Returns:
            SQLite connection with row_factory set to sqlite3.Row

        Raises:
            DatabaseError: If the file or its directory cannot be opened
        """
        db_path = Path(self.path)
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(db_path), timeout=self.timeout)
        except (OSError, sqlite3.Error) as e:
            raise DatabaseError("Could not open database", {"path": self.path}) from e

        conn.row_factory = sqlite3.Row
        return conn

    def core(self) -> Core:
        """Open a connection and return a Core for use in a with-block."""
        return Core(self.connect())

    def init(self) -> None:
        """Apply schema.sql if the database has not been initialized yet."""
        conn = self.connect()
        try:
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
            )
            if cursor.fetchone():
                # Database already initialized, skip
                return

            conn.executescript(SCHEMA_PATH.read_text())
            conn.commit()
            logger.info(f"Applied schema to {self.path}")
        finally:
            conn.close()


def get_database() -> Database:
    """Return the Database handle injected into the current Flask app."""
    return current_app.extensions[EXTENSION_KEY]


def get_core() -> Core:
    """
    Get a database Core bound to the current app's Database.

    Example:
        >>> with get_core() as core:
        ...     row = core.contact.get_by_id(contact_id)
    """
    return get_database().core()
