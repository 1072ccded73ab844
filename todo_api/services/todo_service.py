"""Todo service - business logic for todo management."""

import logging

from todo_api.exceptions import TodoNotFoundError
from todo_api.models.domain import Todo
from todo_api.models.dto import (
    TodoDTO,
    TodoCreateRequest,
    TodoUpdateRequest,
    TodoListResponse,
)
from todo_api.repositories.base import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """
    Service for todo management.

    Responsibilities:
    - Turn repository absence into TodoNotFoundError
    - Convert between domain entities and DTOs

    Does NOT:
    - Handle HTTP requests (that's API layer)
    - Talk to the store directly (that's repository layer)
    """

    def __init__(self, todo_repo: TodoRepository):
        self.todo_repo = todo_repo

    def create_todo(self, request: TodoCreateRequest) -> TodoDTO:
        """Create a new todo. New todos always start not done."""
        todo = self.todo_repo.add(request.title, done=False)
        logger.info("Created todo %s", todo.id)
        return self._to_dto(todo)

    def list_todos(self) -> TodoListResponse:
        """List all todos."""
        todos = self.todo_repo.list()
        return TodoListResponse(todos=[self._to_dto(t) for t in todos])

    def get_todo(self, todo_id: str) -> TodoDTO:
        """Get todo by id.

        Raises:
            TodoNotFoundError: If no todo has this id.
            InvalidTodoIdError: If the id is malformed.
        """
        todo = self.todo_repo.get(todo_id)
        if todo is None:
            logger.debug("Todo %s not found", todo_id)
            raise TodoNotFoundError(todo_id)
        return self._to_dto(todo)

    def update_todo(self, todo_id: str, request: TodoUpdateRequest) -> None:
        """Replace title and done of an existing todo."""
        if not self.todo_repo.update(todo_id, request.title, request.done):
            logger.debug("Todo %s not found for update", todo_id)
            raise TodoNotFoundError(todo_id)
        logger.info("Updated todo %s (done=%s)", todo_id, request.done)

    def delete_todo(self, todo_id: str) -> None:
        """Delete a todo."""
        if not self.todo_repo.delete(todo_id):
            logger.debug("Todo %s not found for delete", todo_id)
            raise TodoNotFoundError(todo_id)
        logger.info("Deleted todo %s", todo_id)

    @staticmethod
    def _to_dto(todo: Todo) -> TodoDTO:
        """Convert domain entity to DTO."""
        return TodoDTO(id=todo.id, title=todo.title, done=todo.done)
