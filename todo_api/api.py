"""REST API endpoints for todos."""

import asyncio

from fastapi import APIRouter, Depends, Request

from todo_api.models.dto import (
    ErrorResponse,
    MessageResponse,
    TodoCreateRequest,
    TodoCreatedResponse,
    TodoDTO,
    TodoListResponse,
    TodoUpdateRequest,
)
from todo_api.repositories.base import TodoRepository
from todo_api.services.todo_service import TodoService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed todo id"},
    404: {"model": ErrorResponse, "description": "Todo not found"},
}


def get_todo_repo(request: Request) -> TodoRepository:
    """Get the repository injected into the app at startup."""
    return request.app.state.todo_repository


def get_todo_service(
    todo_repo: TodoRepository = Depends(get_todo_repo)
) -> TodoService:
    """Get todo service instance."""
    return TodoService(todo_repo)


@router.post("/todos", response_model=TodoCreatedResponse)
async def create_todo(
    request: TodoCreateRequest,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Create a new todo (not done)."""
    todo = await asyncio.to_thread(todo_service.create_todo, request)
    return TodoCreatedResponse(message="Todo created", id=todo.id)


@router.get("/todos", response_model=TodoListResponse)
async def list_todos(
    todo_service: TodoService = Depends(get_todo_service)
):
    """List all todos in store order."""
    return await asyncio.to_thread(todo_service.list_todos)


@router.get("/todos/{todo_id}", response_model=TodoDTO, responses=ERROR_RESPONSES)
async def get_todo(
    todo_id: str,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Get a single todo."""
    return await asyncio.to_thread(todo_service.get_todo, todo_id)


@router.put("/todos/{todo_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def update_todo(
    todo_id: str,
    request: TodoUpdateRequest,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Replace a todo's title and done flag."""
    await asyncio.to_thread(todo_service.update_todo, todo_id, request)
    return MessageResponse(message="Todo updated")


@router.delete("/todos/{todo_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_todo(
    todo_id: str,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Delete a todo."""
    await asyncio.to_thread(todo_service.delete_todo, todo_id)
    return MessageResponse(message="Todo deleted")
