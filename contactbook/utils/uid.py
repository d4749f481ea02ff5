"""Record identifiers for users and contacts.

Every user and contact id is a lowercase UUID v4 string minted here. The
same ids travel in URLs (/contacts/<id>) and in the sub claim of access
tokens, so this module also decides what a well-formed id looks like.
"""

from uuid import UUID, uuid4


def new_id() -> str:
    """Mint the id for a new user or contact record."""
    return str(uuid4())


def is_valid_id(value: str) -> bool:
    """True if value has the canonical form produced by new_id()."""
    try:
        parsed = UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return parsed.version == 4 and str(parsed) == value
