"""Domain enumerations for RoktoSheba.

Enums represent fixed sets of domain values (roles, statuses, error kinds).
All are str-valued so they serialize and store as their plain value.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user document. A donor is a user with role DONOR."""

    DONOR = "donor"
    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Account status. Only ACTIVE donors are listed, assignable and public."""

    ACTIVE = "active"
    PENDING = "pending"
    BLOCKED = "blocked"


class DonationStatus(str, Enum):
    """Donation request lifecycle tag.

    Usual flow is pending -> inprogress -> done | canceled, but any value may
    be set at any time; there is no enforced transition graph.
    """

    PENDING = "pending"
    IN_PROGRESS = "inprogress"
    DONE = "done"
    CANCELED = "canceled"


class BlogStatus(str, Enum):
    """Blog post visibility gate."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ErrorKind(str, Enum):
    """Stable, machine-readable error kinds returned in the `error` field.

    Clients match on these instead of on message text.
    """

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    PAYMENT_PROVIDER_ERROR = "PAYMENT_PROVIDER_ERROR"
    GATEWAY_TIMEOUT = "GATEWAY_TIMEOUT"
