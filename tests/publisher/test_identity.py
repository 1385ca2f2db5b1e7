"""Tests for content id generators."""

import uuid

import pytest
from content_publisher.publisher.identity import sequence_ids, uuid_content_id


def test_uuid_content_id_is_random_uuid4():
    first, second = uuid_content_id(), uuid_content_id()
    assert first != second
    assert uuid.UUID(first).version == 4
    assert str(uuid.UUID(first)) == first


def test_sequence_ids_in_order():
    next_id = sequence_ids(["a", "b"])
    assert [next_id(), next_id()] == ["a", "b"]


def test_sequence_ids_exhausted():
    next_id = sequence_ids(["only"])
    next_id()
    with pytest.raises(RuntimeError, match="exhausted"):
        next_id()
