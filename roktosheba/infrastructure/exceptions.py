"""Infrastructure exceptions for document-store operations.

Store errors extend RoktoShebaException so presentation can map them
to HTTP responses consistently. Messages stay generic; causes are logged.
"""

from roktosheba.domain.enums import ErrorKind
from roktosheba.domain.exceptions import RoktoShebaException


class DocumentStoreError(RoktoShebaException):
    """Firestore request failed (transport error or unexpected status)."""

    def __init__(self, operation: str, status_code: int | None = None) -> None:
        details: dict[str, object] = {"operation": operation}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            "Document store request failed",
            ErrorKind.INTERNAL_ERROR.value,
            details,
        )
