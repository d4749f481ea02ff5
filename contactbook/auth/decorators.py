"""Authentication gate for protected endpoints.

- _authenticate_request() - shared logic, used as a blueprint before_request hook
- @auth_required - the same check as a per-view decorator

A request with no usable bearer token is unauthenticated (401). A request
whose token fails verification is forbidden (403). The token itself is
never logged.
"""

import logging
from functools import wraps

import jwt
from flask import g, request

from ..exceptions import AuthenticationError, AuthorizationError
from . import token

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def _extract_bearer_token() -> str | None:
    """Return the token from 'Authorization: Bearer <token>', or None."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.lower().startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None


def _authenticate_request():
    """
    Verify the request's bearer token and record the caller in flask.g.

    Stores authenticated user information in flask.g:
    - g.user_id: User ID (UUID)
    - g.username: Username

    Raises:
        AuthenticationError: If no bearer token is present
        AuthorizationError: If the token is invalid or expired
    """
    token_str = _extract_bearer_token()
    if token_str is None:
        logger.warning(f"Unauthenticated request to {request.path}")
        raise AuthenticationError(
            "Authentication required",
            {"code": "missing_token", "expected": "Authorization: Bearer <token>"}
        )

    try:
        payload = token.validate_access_token(token_str)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthorizationError("Token has expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthorizationError("Invalid token", {"code": "invalid_token"})

    g.user_id = payload.sub
    g.username = payload.username
    logger.debug(f"JWT authentication successful for user {g.username}")


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @bp.get("/whoami")
    @auth_required
    def whoami():
        return jsonify({"user_id": g.user_id})
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
