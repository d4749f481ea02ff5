"""Pydantic schemas for the contacts API."""

from .contact import (
    ContactCreate,
    ContactResponse,
    ContactUpdate,
)

__all__ = [
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
]
