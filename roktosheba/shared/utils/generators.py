"""Document ID generation (CUID2)."""

from cuid2 import cuid_wrapper

# CUID2 output is lowercase alphanumeric, so it always passes require_document_id.
_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant ID for a Firestore document."""
    return _next_cuid()
