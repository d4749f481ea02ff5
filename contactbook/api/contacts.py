"""Contact CRUD endpoints for ContactBook.

This module implements RESTful endpoints for contact management:
- POST   /contacts        - Create contact owned by the caller
- GET    /contacts        - List the caller's contacts
- PUT    /contacts/{id}   - Update contact
- DELETE /contacts/{id}   - Delete contact

Every route requires a bearer token (see the before_request hook). The
caller's id is available as flask.g.user_id.

Update and delete match on id alone unless settings.enforce_contact_ownership
is enabled, in which case only the caller's own contacts match.
"""

import logging

from flask import Blueprint, g, jsonify, request

from ..auth.decorators import _authenticate_request
from ..config import settings
from ..db import get_core
from ..exceptions import ResourceNotFound
from ..utils import uid
from .schemas import ContactCreate, ContactResponse, ContactUpdate
from .validation import validate_request

logger = logging.getLogger(__name__)


# Create Blueprint
contacts_bp = Blueprint("contacts", __name__)


@contacts_bp.before_request
def authenticate():
    """Require a valid bearer token for every contacts endpoint.

    CORS preflights carry no Authorization header and are answered by
    Flask-CORS, so they pass through.
    """
    if request.method == "OPTIONS":
        return None
    _authenticate_request()


def _row_to_contact_response(row) -> dict:
    """Convert a contacts row to the camelCase JSON representation."""
    return ContactResponse(
        id=row["id"],
        owner_id=row["owner_id"],
        name=row["name"],
        email=row["email"],
        phone_number=row["phone_number"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    ).model_dump(by_alias=True)


def _ownership_filter() -> str | None:
    return g.user_id if settings.enforce_contact_ownership else None


def _check_contact_id(contact_id: str) -> None:
    # Ids that could never have been issued are not looked up
    if not uid.is_valid_id(contact_id):
        raise ResourceNotFound("Contact not found", {"contact_id": contact_id})


@contacts_bp.post("")
@validate_request
def create_contact(data: ContactCreate):
    """
    Create a contact owned by the authenticated user.

    Request Body (ContactCreate):
        - name: str (required)
        - email: str (required)
        - phoneNumber: str (required)

    Returns:
        200: Created contact
        400: Validation error
    """
    with get_core() as core:
        contact_id = core.contact.create(
            owner_id=g.user_id,
            name=data.name,
            email=data.email,
            phone_number=data.phone_number
        )
        row = core.contact.get_by_id(contact_id)

    logger.info(f"Contact {contact_id} created for user {g.user_id}")

    return jsonify(_row_to_contact_response(row)), 200


@contacts_bp.get("")
def list_contacts():
    """
    List the authenticated user's contacts.

    Returns:
        200: Array of contacts (no pagination)
    """
    with get_core() as core:
        rows = core.contact.list_by_owner(g.user_id)

    return jsonify([_row_to_contact_response(row) for row in rows]), 200


@contacts_bp.put("/<contact_id>")
@validate_request
def update_contact(contact_id: str, data: ContactUpdate):
    """
    Update a contact.

    Only the fields present in the body are overwritten.

    Returns:
        200: Updated contact
        404: Contact not found
        400: Validation error
    """
    _check_contact_id(contact_id)

    with get_core() as core:
        row = core.contact.update_by_id(
            contact_id,
            data.model_dump(exclude_none=True),
            owner_id=_ownership_filter()
        )

    if row is None:
        raise ResourceNotFound("Contact not found", {"contact_id": contact_id})

    logger.info(f"Contact {contact_id} updated by user {g.user_id}")

    return jsonify(_row_to_contact_response(row)), 200


@contacts_bp.delete("/<contact_id>")
def delete_contact(contact_id: str):
    """
    Delete a contact.

    Returns:
        200: Confirmation message and the deleted contact
        404: Contact not found
    """
    _check_contact_id(contact_id)

    with get_core() as core:
        row = core.contact.delete_by_id(contact_id, owner_id=_ownership_filter())

    if row is None:
        raise ResourceNotFound("Contact not found", {"contact_id": contact_id})

    logger.info(f"Contact {contact_id} deleted by user {g.user_id}")

    return jsonify({
        "message": "Contact deleted",
        "contact": _row_to_contact_response(row)
    }), 200
