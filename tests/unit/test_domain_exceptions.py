"""Tests for domain exceptions (error_code, message, details)."""

from roktosheba.domain.enums import ErrorKind
from roktosheba.domain.exceptions import (
    DonorUnavailableException,
    EmailAlreadyRegisteredException,
    InvalidIdentifierException,
    PaymentProviderException,
    ResourceNotFoundException,
    RoktoShebaException,
    ValidationException,
)
from roktosheba.infrastructure.exceptions import DocumentStoreError


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = RoktoShebaException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RoktoShebaException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = RoktoShebaException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == ErrorKind.BAD_REQUEST.value
    assert exc.details == {"field": "email"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Invalid").details == {}


def test_invalid_identifier_is_bad_request() -> None:
    exc = InvalidIdentifierException("a/b")
    assert isinstance(exc, ValidationException)
    assert exc.error_code == "BAD_REQUEST"
    assert exc.details == {"field": "id"}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("donation", "abc")
    assert exc.message == "donation not found: abc"
    assert exc.error_code == "NOT_FOUND"
    assert exc.details == {"resource_type": "donation", "resource_id": "abc"}


def test_donor_unavailable_message() -> None:
    exc = DonorUnavailableException("d@x.com")
    assert isinstance(exc, ResourceNotFoundException)
    assert exc.message == "Donor not found or inactive"


def test_email_already_registered_is_conflict() -> None:
    exc = EmailAlreadyRegisteredException("a@x.com")
    assert exc.message == "Email already registered"
    assert exc.error_code == "CONFLICT"


def test_payment_provider_exception_keeps_provider_message() -> None:
    exc = PaymentProviderException("Your card was declined.", provider_code="card_declined")
    assert exc.message == "Your card was declined."
    assert exc.error_code == "PAYMENT_PROVIDER_ERROR"
    assert exc.details == {"provider_code": "card_declined"}


def test_document_store_error_is_generic() -> None:
    exc = DocumentStoreError("POST", 503)
    assert exc.error_code == "INTERNAL_ERROR"
    assert exc.message == "Document store request failed"
    assert exc.details == {"operation": "POST", "status_code": 503}
