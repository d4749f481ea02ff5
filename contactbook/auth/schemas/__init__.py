"""Authentication Pydantic schemas for API validation."""

from .auth import (
    UserCredentials,
    UserResponse,
    RegistrationResponse,
    TokenPayload,
    TokenResponse,
)

__all__ = [
    "UserCredentials",
    "UserResponse",
    "RegistrationResponse",
    "TokenPayload",
    "TokenResponse",
]
