"""Errors raised by the todo service and mapped to HTTP responses in server.py."""


class TodoApiError(Exception):
    """Base class for todo service errors."""


class TodoNotFoundError(TodoApiError):
    """No todo matches the given id."""

    message = "Todo not found"

    def __init__(self, todo_id: str):
        super().__init__(f"Todo '{todo_id}' not found")
        self.todo_id = todo_id


class InvalidTodoIdError(TodoApiError):
    """The id is not in the store's identifier format."""

    message = "Invalid todo id"

    def __init__(self, todo_id: str):
        super().__init__(f"Invalid todo id: {todo_id!r}")
        self.todo_id = todo_id


class ConfigError(TodoApiError):
    """Invalid configuration value."""
