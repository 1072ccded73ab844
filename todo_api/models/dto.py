"""Data Transfer Objects - API contracts."""

from pydantic import BaseModel, Field, ConfigDict
from typing import List


class TodoDTO(BaseModel):
    """Todo data for API responses."""
    id: str
    title: str
    done: bool

    model_config = ConfigDict(from_attributes=True)


class TodoCreateRequest(BaseModel):
    """Request to create a new todo."""
    title: str = Field(..., min_length=1)


class TodoUpdateRequest(BaseModel):
    """Request to replace a todo's title and done flag."""
    title: str = Field(..., min_length=1)
    done: bool


class TodoListResponse(BaseModel):
    """Response with all todos."""
    todos: List[TodoDTO]


class TodoCreatedResponse(BaseModel):
    """Response after creating a todo."""
    message: str = "Todo created"
    id: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class HealthResponse(BaseModel):
    """Liveness payload."""
    status: str = "ok"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
