"""Contact schemas.

Python attributes are snake_case; JSON on the wire is camelCase
(phoneNumber, ownerId, createdAt, updatedAt). Both spellings are accepted
on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContactBase(BaseModel):
    """Fields shared by contact requests and responses."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)


class ContactCreate(ContactBase):
    """Request body for POST /contacts."""


class ContactUpdate(BaseModel):
    """Request body for PUT /contacts/<id>.

    Only the fields present in the body are overwritten.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    phone_number: str | None = Field(default=None, min_length=1)


class ContactResponse(ContactBase):
    """A stored contact."""
    id: str
    owner_id: str
    created_at: str
    updated_at: str
