"""Custom exceptions for ContactBook.

Every exception carries a human-readable message and an optional details
dict. The Flask error handlers in main.py map each class to an HTTP status
and render the same JSON error envelope:

    {"error": {"type": "...", "message": "...", "details": {...}}}
"""


class ContactBookError(Exception):
    """Base exception for all ContactBook errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ContactBookError):
    """Request data failed validation (400)."""


class DuplicateKeyError(ContactBookError):
    """A uniquely-keyed record already exists (400)."""


class AuthenticationError(ContactBookError):
    """Missing credentials or credentials that do not match (401)."""


class AuthorizationError(ContactBookError):
    """Credentials were presented but could not be verified (403)."""


class ResourceNotFound(ContactBookError):
    """Requested resource does not exist (404)."""


class DatabaseError(ContactBookError):
    """The store could not complete an operation (500)."""
