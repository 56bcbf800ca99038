"""Domain exceptions for RoktoSheba.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

from roktosheba.domain.enums import ErrorKind


class RoktoShebaException(Exception):
    """Base exception for all RoktoSheba application errors.

    All custom exceptions inherit from this class to allow consistent error
    handling and logging. Presentation layer maps these to HTTP responses
    using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code (an ErrorKind value).
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used for error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RoktoShebaException):
    """Raised when input is missing or malformed (BadRequest)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, ErrorKind.BAD_REQUEST.value, details)


class InvalidIdentifierException(ValidationException):
    """Raised when a path identifier is not a well-formed document ID."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid identifier: {value!r}", field="id")


class ResourceNotFoundException(RoktoShebaException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'donation').
            resource_id: The ID (or email) that was not found.
            message: Optional override for the default message.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            ErrorKind.NOT_FOUND.value,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DonorUnavailableException(ResourceNotFoundException):
    """Raised when assigning a donor whose email is unknown or not an active donor."""

    def __init__(self, email: str) -> None:
        super().__init__("donor", email, message="Donor not found or inactive")


class EmailAlreadyRegisteredException(RoktoShebaException):
    """Raised when registering an email that already has a user document."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email already registered",
            ErrorKind.CONFLICT.value,
            {"email": email},
        )


class PaymentProviderException(RoktoShebaException):
    """Raised when the payment provider rejects or fails a request.

    The provider's message is passed through unchanged.
    """

    def __init__(self, message: str, provider_code: str | None = None) -> None:
        details = {"provider_code": provider_code} if provider_code else {}
        super().__init__(message, ErrorKind.PAYMENT_PROVIDER_ERROR.value, details)
