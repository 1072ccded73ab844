"""Unit tests for todo id helpers."""

import pytest
from bson import ObjectId

from todo_api.exceptions import InvalidTodoIdError
from todo_api.utils.ids import new_todo_id, parse_todo_id


def test_parse_valid_id():
    """Test a 24-hex-digit string becomes an ObjectId."""
    oid = ObjectId()
    assert parse_todo_id(str(oid)) == oid


@pytest.mark.parametrize("value", [
    "",
    "123",
    "zzzzzzzzzzzzzzzzzzzzzzzz",
    "0123456789abcdef012345678",
    None,
])
def test_parse_invalid_id(value):
    """Test malformed ids raise InvalidTodoIdError."""
    with pytest.raises(InvalidTodoIdError):
        parse_todo_id(value)


def test_new_ids_are_unique_and_valid():
    """Test generated ids use the ObjectId format."""
    ids = {new_todo_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(ObjectId.is_valid(i) for i in ids)
