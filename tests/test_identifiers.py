"""Unit tests for identifier validation"""

import uuid

import pytest

from todo_api.core.identifiers import is_valid_identifier, new_identifier


@pytest.mark.parametrize(
    "value",
    [
        str(uuid.uuid4()),
        str(uuid.uuid1()),
        str(uuid.uuid4()).upper(),
        "00000000-0000-0000-0000-000000000000",
        "ffffffff-ffff-ffff-ffff-ffffffffffff",
    ],
)
def test_accepts_uuid_strings(value):
    assert is_valid_identifier(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not-a-uuid",
        "123",
        uuid.uuid4().hex,
        "{" + str(uuid.uuid4()) + "}",
        "urn:uuid:" + str(uuid.uuid4()),
        str(uuid.uuid4()) + "0",
        # Version nibble 0 and non-RFC variant
        "6ba7b810-9dad-01d1-80b4-00c04fd430c8",
        "6ba7b810-9dad-11d1-c0b4-00c04fd430c8",
        None,
        42,
        uuid.uuid4(),
    ],
)
def test_rejects_everything_else(value):
    assert not is_valid_identifier(value)


def test_new_identifier_is_valid_and_unique():
    ids = {new_identifier() for _ in range(100)}
    assert len(ids) == 100
    assert all(is_valid_identifier(i) for i in ids)
