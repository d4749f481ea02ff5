"""Contact store operations.

IMPORT CONVENTION:
- Core accesses these through core.contact property

OWNERSHIP:
Contacts are listed by owner. update_by_id() and delete_by_id() match on id
alone unless an owner_id is passed, in which case the record must also
belong to that owner. The API layer decides which mode to use
(settings.enforce_contact_ownership).
"""

import sqlite3
from typing import Any

from ..utils import isodatetime, uid

# Columns a caller may overwrite through update_by_id()
UPDATABLE_FIELDS = ("name", "email", "phone_number")


class ContactOperations:
    """Contact operations over the contacts table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, owner_id: str, name: str, email: str, phone_number: str) -> str:
        """Insert a contact owned by owner_id and return the generated id."""
        contact_id = uid.new_id()
        now = isodatetime.now()
        self._conn.execute(
            """INSERT INTO contacts (
                id, owner_id, name, email, phone_number, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (contact_id, owner_id, name, email, phone_number, now, now)
        )
        return contact_id

    def get_by_id(self, contact_id: str, owner_id: str | None = None) -> sqlite3.Row | None:
        """Get a contact by id, optionally restricted to one owner."""
        query = "SELECT * FROM contacts WHERE id = ?"
        params: list[Any] = [contact_id]
        if owner_id is not None:
            query += " AND owner_id = ?"
            params.append(owner_id)
        return self._conn.execute(query, params).fetchone()

    def list_by_owner(self, owner_id: str) -> list[sqlite3.Row]:
        """All contacts owned by owner_id, oldest first. No pagination."""
        return self._conn.execute(
            "SELECT * FROM contacts WHERE owner_id = ? ORDER BY created_at, rowid",
            (owner_id,)
        ).fetchall()

    def update_by_id(
        self,
        contact_id: str,
        fields: dict[str, Any],
        owner_id: str | None = None
    ) -> sqlite3.Row | None:
        """Overwrite the given fields of a contact.

        Args:
            contact_id: The contact to update
            fields: Mapping of column name to new value; keys outside
                UPDATABLE_FIELDS are ignored
            owner_id: If given, only a contact owned by this user matches

        Returns:
            The updated row, or None if no contact matched
        """
        existing = self.get_by_id(contact_id, owner_id)
        if existing is None:
            return None

        updates = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        if updates:
            # Column names come from UPDATABLE_FIELDS, never from the request
            sets = ", ".join(f"{column} = ?" for column in updates)
            self._conn.execute(
                f"UPDATE contacts SET {sets}, updated_at = ? WHERE id = ?",
                [*updates.values(), isodatetime.now(), contact_id]
            )

        return self.get_by_id(contact_id)

    def delete_by_id(self, contact_id: str, owner_id: str | None = None) -> sqlite3.Row | None:
        """Delete a contact and return the row as it was, or None if no match."""
        existing = self.get_by_id(contact_id, owner_id)
        if existing is None:
            return None

        self._conn.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
        return existing
