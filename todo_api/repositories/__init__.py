"""Data access layer for todos."""

from .base import TodoRepository
from .memory_repository import InMemoryTodoRepository
from .mongo_repository import MongoTodoRepository

__all__ = [
    "TodoRepository",
    "InMemoryTodoRepository",
    "MongoTodoRepository",
]
