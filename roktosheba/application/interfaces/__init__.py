"""Ports (Protocols) implemented by infrastructure."""

from roktosheba.application.interfaces.repositories import (
    IBlogRepository,
    IContactRepository,
    IDonationRepository,
    IFundingRepository,
    IUserRepository,
)
from roktosheba.application.interfaces.services import IPaymentGateway

__all__ = [
    "IBlogRepository",
    "IContactRepository",
    "IDonationRepository",
    "IFundingRepository",
    "IPaymentGateway",
    "IUserRepository",
]
