"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from roktosheba.domain.enums import (
    BlogStatus,
    DonationStatus,
    ErrorKind,
    UserRole,
    UserStatus,
)
from roktosheba.domain.exceptions import (
    DonorUnavailableException,
    EmailAlreadyRegisteredException,
    InvalidIdentifierException,
    PaymentProviderException,
    ResourceNotFoundException,
    RoktoShebaException,
    ValidationException,
)

__all__ = [
    # Enums
    "BlogStatus",
    "DonationStatus",
    "ErrorKind",
    "UserRole",
    "UserStatus",
    # Exceptions
    "DonorUnavailableException",
    "EmailAlreadyRegisteredException",
    "InvalidIdentifierException",
    "PaymentProviderException",
    "ResourceNotFoundException",
    "RoktoShebaException",
    "ValidationException",
]
