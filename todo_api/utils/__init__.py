"""Todo API utilities package."""

from .ids import new_todo_id, parse_todo_id

__all__ = [
    "new_todo_id",
    "parse_todo_id",
]
