"""Identifier format and status-filter parsing."""

import pytest

from roktosheba.application.dtos.common import PageRequest
from roktosheba.application.services.filters import parse_status_filter
from roktosheba.core.identifiers import is_valid_document_id, require_document_id
from roktosheba.domain.enums import DonationStatus
from roktosheba.domain.exceptions import InvalidIdentifierException, ValidationException


@pytest.mark.parametrize("value", ["abc", "A_b-9", "x" * 64, "clx1y2z3"])
def test_valid_ids(value: str) -> None:
    assert is_valid_document_id(value)
    assert require_document_id(value) == value


@pytest.mark.parametrize("value", ["", "a/b", "a.b", "x" * 65, "sp ace", "64f0c2\n"])
def test_invalid_ids(value: str) -> None:
    assert not is_valid_document_id(value)
    with pytest.raises(InvalidIdentifierException):
        require_document_id(value)


@pytest.mark.parametrize("raw", [None, "", "  ", "all", "ALL"])
def test_status_filter_disabled(raw) -> None:
    assert parse_status_filter(raw, DonationStatus) is None


def test_status_filter_parses_member() -> None:
    assert parse_status_filter("inprogress", DonationStatus) is DonationStatus.IN_PROGRESS


def test_status_filter_rejects_unknown() -> None:
    with pytest.raises(ValidationException) as exc_info:
        parse_status_filter("lost", DonationStatus)
    assert exc_info.value.details == {"field": "status"}


def test_page_request_skip() -> None:
    assert PageRequest(page=3, limit=5).skip == 15
    assert PageRequest().skip == 0


def test_page_request_rejects_negative_page() -> None:
    with pytest.raises(ValueError):
        PageRequest(page=-1)
