"""Todo identifier helpers.

Ids are MongoDB ObjectIds internally and their 24-hex-digit string form at
the HTTP boundary.
"""

from bson import ObjectId

from todo_api.exceptions import InvalidTodoIdError


def parse_todo_id(todo_id: str) -> ObjectId:
    """Convert an id from the API into an ObjectId.

    Raises:
        InvalidTodoIdError: If the string is not a valid ObjectId.
    """
    if not isinstance(todo_id, str) or not ObjectId.is_valid(todo_id):
        raise InvalidTodoIdError(todo_id)
    return ObjectId(todo_id)


def new_todo_id() -> str:
    """Generate a fresh id in the store's format."""
    return str(ObjectId())
