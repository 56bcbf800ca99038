"""Query-parameter parsing shared by list operations."""

from enum import Enum
from typing import TypeVar

from roktosheba.core.constants import STATUS_FILTER_ALL
from roktosheba.domain.exceptions import ValidationException

E = TypeVar("E", bound=Enum)


def parse_status_filter(raw: str | None, enum_cls: type[E]) -> E | None:
    """Return the status to filter on, or None when filtering is disabled.

    None, empty string and "all" (any case) disable filtering. Any other
    value must be a member of enum_cls.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value or value.lower() == STATUS_FILTER_ALL:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationException(
            f"Invalid status filter {value!r}; expected one of: {allowed}, {STATUS_FILTER_ALL}",
            field="status",
        ) from None
