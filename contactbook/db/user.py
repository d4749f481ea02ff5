"""User (credential store) operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

Username uniqueness is enforced by the UNIQUE constraint on users.username.
create() lets sqlite3.IntegrityError propagate so callers can tell a
duplicate apart from other store failures.
"""

import sqlite3

from ..utils import isodatetime, uid


class UserOperations:
    """Credential store operations over the users table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def get_by_username(self, username: str) -> sqlite3.Row | None:
        """Find a user row by exact username, or None."""
        return self._conn.execute(
            "SELECT * FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def get_by_id(self, user_id: str) -> sqlite3.Row | None:
        """Find a user row by id, or None."""
        return self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

    def create(self, username: str, password_hash: str) -> str:
        """Insert a user and return the generated id.

        Args:
            username: Unique username
            password_hash: Already-hashed password (never plaintext)

        Returns:
            The auto-generated user ID (UUID v4 string)

        Raises:
            sqlite3.IntegrityError: If the username already exists
        """
        user_id = uid.new_id()
        self._conn.execute(
            """INSERT INTO users (id, username, password_hash, created_at)
               VALUES (?, ?, ?, ?)""",
            (user_id, username, password_hash, isodatetime.now())
        )
        return user_id
