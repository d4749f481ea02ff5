"""Authentication module for ContactBook.

This module provides authentication and authorization functionality:
- Schema validation for auth operations
- JWT token generation and validation
- Password hashing and verification
- Authentication middleware for protected endpoints

Auth endpoints (under settings.api_prefix):
- POST /register - Create a user account
- POST /login - Authenticate and return JWT token
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
