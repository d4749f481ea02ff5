"""Request body validation decorator.

@validate_request looks at the view's `data` parameter annotation. If it is
a pydantic model, the request body is parsed into it and passed in as
`data`; path parameters are passed through untouched.

    @bp.put("/<contact_id>")
    @validate_request
    def update_contact(contact_id: str, data: ContactUpdate):
        ...

Bodies are read as JSON, falling back to form fields for HTML form posts.
Validation failures raise ValidationError with pydantic's error list. Input
values are stripped from the details so passwords are never echoed back.
"""

from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _read_body() -> dict:
    if request.is_json:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return body
    if request.form:
        return request.form.to_dict()
    raise ValidationError("Request body is required")


def validate_request(f):
    """Parse and validate the request body into the view's `data` model."""
    model = get_type_hints(f).get("data")
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        model = None

    @wraps(f)
    def wrapper(*args, **kwargs):
        if model is not None:
            try:
                kwargs["data"] = model.model_validate(_read_body())
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {"errors": e.errors(include_url=False, include_context=False, include_input=False)}
                )
        return f(*args, **kwargs)

    return wrapper
