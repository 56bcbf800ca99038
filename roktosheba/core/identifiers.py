"""Document identifier format validation.

Shared by every route that takes an identifier in the path so malformed
IDs are rejected as BadRequest before any store call.
"""

import re

from roktosheba.domain.exceptions import InvalidIdentifierException

# CUID-style: alphanumeric, hyphen, underscore; no '/' so an ID never escapes its collection.
DOCUMENT_ID_MAX_LENGTH = 64
_DOCUMENT_ID_RE = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(DOCUMENT_ID_MAX_LENGTH) + r"}$"
)


def is_valid_document_id(value: str) -> bool:
    """Return True if value is a well-formed document identifier."""
    if not value or len(value) > DOCUMENT_ID_MAX_LENGTH:
        return False
    return bool(_DOCUMENT_ID_RE.fullmatch(value))


def require_document_id(value: str) -> str:
    """Return value unchanged or raise InvalidIdentifierException."""
    if not is_valid_document_id(value):
        raise InvalidIdentifierException(value)
    return value
