"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, List

from todo_api.models.domain import Todo


class TodoRepository(ABC):
    """
    Base repository interface for todos.

    Abstracts data access - MongoDB in production, a dict in tests.
    Each method performs exactly one store operation. Methods taking an id
    raise InvalidTodoIdError when the id is not in the store's format.
    """

    @abstractmethod
    def add(self, title: str, done: bool = False) -> Todo:
        """Insert a new todo and return it with its generated id."""
        pass

    @abstractmethod
    def get(self, todo_id: str) -> Optional[Todo]:
        """Get todo by ID."""
        pass

    @abstractmethod
    def list(self) -> List[Todo]:
        """List all todos in store order."""
        pass

    @abstractmethod
    def update(self, todo_id: str, title: str, done: bool) -> bool:
        """Replace title and done. Returns True if a todo matched."""
        pass

    @abstractmethod
    def delete(self, todo_id: str) -> bool:
        """Delete todo by ID. Returns True if deleted, False if not found."""
        pass
