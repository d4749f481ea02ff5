"""Pydantic schemas for registration, login and tokens.

Only presence is validated: username and password must be non-empty
strings. There are no password strength rules.
"""

from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Request body for POST /register and POST /login."""
    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="Plaintext password")


class UserResponse(BaseModel):
    """Public view of a user (never includes the password hash)."""
    id: str
    username: str
    created_at: str


class RegistrationResponse(BaseModel):
    """Response body for a successful registration."""
    message: str
    user: UserResponse


class TokenPayload(BaseModel):
    """Decoded JWT claims.

    exp is absent unless token expiry is configured.
    """
    sub: str
    username: str
    iat: int
    exp: int | None = None


class TokenResponse(BaseModel):
    """Response body for a successful login."""
    token: str
    token_type: str = "bearer"
