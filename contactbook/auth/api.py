"""Authentication API endpoints for ContactBook.

These endpoints handle user accounts and return JSON responses:
- POST /register - Create a user
- POST /login - Exchange credentials for a JWT
- GET /me - Current user info (requires bearer token)

The blueprint is mounted under settings.api_prefix in main.py.
"""

import logging

from flask import Blueprint, g, jsonify

from ..api.validation import validate_request
from ..db import get_core
from ..exceptions import AuthenticationError, ResourceNotFound
from . import service, token
from .decorators import auth_required
from .schemas import RegistrationResponse, TokenResponse, UserCredentials

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/register")
@validate_request
def register(data: UserCredentials):
    """
    Register a new user.

    Returns:
        200: Registration message and the created user
        400: Username already exists, or missing fields

    Example request:
    ```json
    {"username": "alice", "password": "s3cret"}
    ```

    Example response:
    ```json
    {
        "message": "Registration successful",
        "user": {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "username": "alice",
            "created_at": "2026-10-19T10:30:00Z"
        }
    }
    ```
    """
    with get_core() as core:
        user = service.register_user(core, data.username, data.password)

    logger.info(f"Registered user {user.username} ({user.id})")

    return jsonify(
        RegistrationResponse(message="Registration successful", user=user).model_dump()
    ), 200


@auth_bp.post("/login")
@validate_request
def login(data: UserCredentials):
    """
    Authenticate user and return JWT token.

    Accepts both JSON and form data. Unknown usernames and wrong passwords
    get the same 401 response.

    Example response:
    ```json
    {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...", "token_type": "bearer"}
    ```
    """
    with get_core() as core:
        user = service.verify_credentials(core, data.username, data.password)

    if user is None:
        logger.warning(f"Failed login attempt for username: {data.username}")
        raise AuthenticationError("Invalid credentials")

    access_token = token.generate_access_token(user)
    logger.info(f"Successful login: {user.username}")

    return jsonify(TokenResponse(token=access_token).model_dump()), 200


@auth_bp.get("/me")
@auth_required
def me():
    """Return the user the bearer token was issued to."""
    with get_core() as core:
        user = service.get_user_by_id(core, g.user_id)

    if user is None:
        raise ResourceNotFound("User not found", {"user_id": g.user_id})

    return jsonify(user.model_dump()), 200
