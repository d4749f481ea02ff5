"""JWT token service.

Tokens are HS256-signed JWTs carrying:
- sub: user id
- username
- iat: issued-at (unix seconds)
- exp: only when settings.jwt_expiry_days is set

Verification is stateless: only the token and settings.jwt_secret_key are
needed, there is no server-side session lookup.
"""

from datetime import timedelta

import jwt
from pydantic import ValidationError

from ..config import settings
from ..utils import isodatetime, uid
from .schemas import TokenPayload, UserResponse

ALGORITHM = "HS256"


def generate_access_token(user: UserResponse) -> str:
    """Issue a signed access token for user."""
    now = isodatetime.now_unix()
    payload = {
        "sub": user.id,
        "username": user.username,
        "iat": now,
    }
    if settings.jwt_expiry_days is not None:
        payload["exp"] = now + int(timedelta(days=settings.jwt_expiry_days).total_seconds())

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=ALGORITHM)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify a token's signature (and expiry, if present) and return its claims.

    Raises:
        jwt.ExpiredSignatureError: If the token carries an exp in the past
        jwt.InvalidTokenError: If the token is malformed, forged, lacks
            required claims, or its sub is not a user id
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[ALGORITHM],
        options={"require": ["sub", "iat"]},
    )
    try:
        claims = TokenPayload(**payload)
    except ValidationError as e:
        raise jwt.InvalidTokenError(f"Invalid token claims: {e.error_count()} error(s)")

    if not uid.is_valid_id(claims.sub):
        raise jwt.InvalidTokenError("Token subject is not a user id")

    return claims
