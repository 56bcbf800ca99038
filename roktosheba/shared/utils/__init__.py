"""Shared utilities: datetime, generators."""

from roktosheba.shared.utils.datetime import ensure_utc, utc_now
from roktosheba.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
