"""Utility functions for ContactBook.

Import convention: use module-level imports for clarity.

    from ..utils import isodatetime, uid
    timestamp = isodatetime.now()
    contact_id = uid.new_id()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
