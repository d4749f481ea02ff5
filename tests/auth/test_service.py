"""Tests for auth service module.

Tests password hashing, registration, and credential verification.
"""

import pytest

from contactbook.auth import service
from contactbook.db import Core
from contactbook.exceptions import DuplicateKeyError


# ============================================================================
# Password Hashing and Verification Tests
# ============================================================================


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_bcrypt_string(self):
        """Password hashing should return a bcrypt hash string."""
        hashed = service.hash_password("SecurePass123")
        assert isinstance(hashed, str)
        assert len(hashed) == 60  # Bcrypt hashes are always 60 characters
        assert hashed.startswith("$2b$")

    def test_hash_password_uses_configured_work_factor(self):
        """The cost segment of the hash should match the configured rounds."""
        hashed = service.hash_password("SecurePass123")
        assert hashed.split("$")[2] == "04"

    def test_hash_password_different_hashes(self):
        """Same password should produce different hashes (due to salt)."""
        password = "SecurePass123"
        assert service.hash_password(password) != service.hash_password(password)

    def test_verify_password_valid(self):
        """Verification should succeed for correct password."""
        hashed = service.hash_password("SecurePass123")
        assert service.verify_password("SecurePass123", hashed) is True

    def test_verify_password_invalid(self):
        """Verification should fail for incorrect password."""
        hashed = service.hash_password("SecurePass123")
        assert service.verify_password("WrongPass456", hashed) is False

    def test_verify_password_empty_string(self):
        """Empty string should not match a non-empty password's hash."""
        hashed = service.hash_password("SecurePass123")
        assert service.verify_password("", hashed) is False

    def test_verify_password_empty_string_round_trip(self):
        """The empty string verifies against its own hash like any plaintext."""
        hashed = service.hash_password("")
        assert service.verify_password("", hashed) is True
        assert service.verify_password("x", hashed) is False

    def test_verify_password_empty_hash(self):
        """An empty stored hash never verifies."""
        assert service.verify_password("SecurePass123", "") is False

    def test_verify_password_malformed_hash(self):
        """A hash that isn't bcrypt should fail verification rather than raise."""
        assert service.verify_password("SecurePass123", "not-a-bcrypt-hash") is False

    def test_verify_password_unicode(self):
        """Verification should handle unicode characters."""
        password = "SecurePass123\U0001F512"
        hashed = service.hash_password(password)
        assert service.verify_password(password, hashed) is True
        assert service.verify_password("SecurePass123", hashed) is False

    def test_hash_password_long_password(self):
        """Passwords over bcrypt's 72-byte limit should hash and verify."""
        password = "x" * 100
        hashed = service.hash_password(password)
        assert service.verify_password(password, hashed) is True

    def test_only_first_72_bytes_are_significant(self):
        """Passwords sharing their first 72 bytes verify against each other."""
        hashed = service.hash_password("a" * 72 + "Y")
        assert service.verify_password("a" * 72 + "X", hashed) is True
        assert service.verify_password("a" * 71 + "X", hashed) is False

    def test_multibyte_truncation_uses_bytes_not_characters(self):
        """The 72-byte cut applies to the UTF-8 encoding."""
        # 36 two-byte characters fill the 72 significant bytes
        hashed = service.hash_password("é" * 36 + "tail")
        assert service.verify_password("é" * 36, hashed) is True
        assert service.verify_password("é" * 35, hashed) is False


# ============================================================================
# Registration Tests
# ============================================================================


class TestRegisterUser:
    """Tests for register_user."""

    def test_register_returns_user_response(self, core: Core):
        """Registering should return the public user view."""
        user = service.register_user(core, "alice", "SecurePass123")

        assert user.id is not None
        assert user.username == "alice"
        assert user.created_at is not None
        assert not hasattr(user, "password_hash")

    def test_register_stores_hash_not_plaintext(self, core: Core):
        """Password should be hashed, not stored in plain text."""
        service.register_user(core, "alice", "SecurePass123")

        row = core.user.get_by_username("alice")
        assert row["password_hash"] != "SecurePass123"
        assert service.verify_password("SecurePass123", row["password_hash"]) is True

    def test_register_duplicate_username_raises(self, core: Core):
        """Registering a taken username should raise DuplicateKeyError."""
        service.register_user(core, "alice", "SecurePass123")

        with pytest.raises(DuplicateKeyError) as exc_info:
            service.register_user(core, "alice", "OtherPass456")

        assert exc_info.value.details == {"username": "alice"}

    def test_register_race_reported_as_duplicate(self, core: Core, monkeypatch):
        """If the pre-check misses a concurrent insert, the UNIQUE constraint decides."""
        service.register_user(core, "alice", "SecurePass123")

        # Simulate the other request inserting between our check and insert
        monkeypatch.setattr(core.user, "get_by_username", lambda username: None)

        with pytest.raises(DuplicateKeyError):
            service.register_user(core, "alice", "OtherPass456")

        count = core._conn.execute(
            "SELECT COUNT(*) FROM users WHERE username = ?", ("alice",)
        ).fetchone()[0]
        assert count == 1

    def test_usernames_are_case_sensitive(self, core: Core):
        """Usernames differing only in case are distinct users."""
        alice = service.register_user(core, "alice", "SecurePass123")
        alice_upper = service.register_user(core, "Alice", "SecurePass123")

        assert alice.id != alice_upper.id

    def test_get_user_by_id(self, core: Core):
        """get_user_by_id should find a registered user and miss unknown ids."""
        created = service.register_user(core, "alice", "SecurePass123")

        assert service.get_user_by_id(core, created.id) == created
        assert service.get_user_by_id(core, "550e8400-e29b-41d4-a716-446655440000") is None


# ============================================================================
# Credential Verification Tests
# ============================================================================


class TestCredentialVerification:
    """Tests for verify_credentials."""

    def test_verify_credentials_valid(self, core: Core):
        """Valid credentials should return user."""
        created = service.register_user(core, "alice", "SecurePass123")

        user = service.verify_credentials(core, "alice", "SecurePass123")
        assert user is not None
        assert user.id == created.id

    def test_verify_credentials_invalid_password(self, core: Core):
        """Invalid password should return None."""
        service.register_user(core, "alice", "SecurePass123")

        assert service.verify_credentials(core, "alice", "WrongPassword") is None

    def test_verify_credentials_unknown_username(self, core: Core):
        """Unknown username should return None."""
        service.register_user(core, "alice", "SecurePass123")

        assert service.verify_credentials(core, "nobody", "SecurePass123") is None

    def test_unknown_username_still_runs_bcrypt(self, core: Core, monkeypatch):
        """Unknown usernames cost one bcrypt check, like a wrong password."""
        service.register_user(core, "alice", "SecurePass123")
        calls = []
        real_checkpw = service.bcrypt.checkpw

        def counting_checkpw(password, hashed):
            calls.append(hashed)
            return real_checkpw(password, hashed)

        monkeypatch.setattr(service.bcrypt, "checkpw", counting_checkpw)

        assert service.verify_credentials(core, "nobody", "SecurePass123") is None
        assert service.verify_credentials(core, "alice", "WrongPassword") is None
        assert len(calls) == 2

    def test_verify_credentials_password_case_sensitive(self, core: Core):
        """Password verification should be case-sensitive."""
        service.register_user(core, "alice", "SecurePass123")

        assert service.verify_credentials(core, "alice", "securepass123") is None
        assert service.verify_credentials(core, "alice", "SecurePass123") is not None
