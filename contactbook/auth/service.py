"""Authentication service: password hashing, registration and credential checks.

Functions here take a Core so that the caller controls the connection
lifecycle (commit/rollback on with-block exit).
"""

import logging
import sqlite3
from functools import lru_cache

import bcrypt

from ..config import settings
from ..db import Core
from ..exceptions import DuplicateKeyError
from .schemas import UserResponse

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72


# ============================================================================
# Password Hashing
# ============================================================================


def _password_bytes(password: str) -> bytes:
    # bcrypt only uses the first 72 bytes; bcrypt>=5 raises on longer input
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured work factor.

    Only the first 72 bytes of the UTF-8 encoded password are significant,
    so two passwords sharing that prefix produce interchangeable hashes.
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash. Never raises.

    Any plaintext, the empty string included, verifies against its own hash.
    An empty or malformed hash verifies as False.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"contactbook-dummy-password", bcrypt.gensalt(rounds=rounds)).decode("utf-8")


# ============================================================================
# Users
# ============================================================================


def _row_to_user(row: sqlite3.Row) -> UserResponse:
    return UserResponse(
        id=row["id"],
        username=row["username"],
        created_at=row["created_at"],
    )


def get_user_by_id(core: Core, user_id: str) -> UserResponse | None:
    row = core.user.get_by_id(user_id)
    return _row_to_user(row) if row else None


def register_user(core: Core, username: str, password: str) -> UserResponse:
    """
    Create a user with a hashed password.

    The existence check catches the common case. Two concurrent registrations
    can both pass it, so the UNIQUE constraint on users.username decides the
    race and the loser is reported the same way.

    Raises:
        DuplicateKeyError: If the username is already taken
    """
    if core.user.get_by_username(username) is not None:
        raise DuplicateKeyError("Username already exists", {"username": username})

    try:
        user_id = core.user.create(username, hash_password(password))
    except sqlite3.IntegrityError:
        logger.warning(f"Username taken by concurrent registration: {username}")
        raise DuplicateKeyError("Username already exists", {"username": username})

    return _row_to_user(core.user.get_by_id(user_id))


def verify_credentials(core: Core, username: str, password: str) -> UserResponse | None:
    """Return the user if username and password match, else None.

    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    row = core.user.get_by_username(username)
    if row is None:
        # Unknown usernames cost one bcrypt check, same as a wrong password
        verify_password(password, _dummy_hash(settings.bcrypt_work_factor))
        return None
    if not verify_password(password, row["password_hash"]):
        return None
    return _row_to_user(row)
