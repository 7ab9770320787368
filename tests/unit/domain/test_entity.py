"""Tests for catalog/domain/models/entity.py."""

from uuid import UUID, uuid4

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.models.entity import parse_id


def test_parse_id_passes_uuid_through():
    value = uuid4()
    assert parse_id(value) is value


def test_parse_id_accepts_canonical_string():
    value = uuid4()
    assert parse_id(str(value)) == value


def test_parse_id_accepts_hex_without_hyphens():
    value = uuid4()
    assert parse_id(value.hex) == value


@pytest.mark.parametrize("raw", ["", "not-an-id", "507f1f77bcf86cd799439011", "1234"])
def test_parse_id_rejects_malformed_values(raw):
    with pytest.raises(ValidationError):
        parse_id(raw)


def test_parse_id_returns_uuid_type():
    assert isinstance(parse_id(str(uuid4())), UUID)
