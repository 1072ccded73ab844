"""FastAPI server for the todo service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router as api_router
from .config import STORE_MEMORY, Settings
from .exceptions import InvalidTodoIdError, TodoNotFoundError
from .models.dto import HealthResponse
from .repositories.base import TodoRepository
from .repositories.memory_repository import InMemoryTodoRepository
from .repositories.mongo_repository import MongoTodoRepository

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[TodoRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application.

    Args:
        repository: Store to serve from. When omitted, one is built from
            settings at startup and torn down at shutdown.
        settings: Runtime settings. Defaults to Settings.from_env().
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for app startup/shutdown."""
        client = None
        if getattr(app.state, "todo_repository", None) is None:
            if settings.store_backend == STORE_MEMORY:
                logger.info("Using in-memory todo store")
                app.state.todo_repository = InMemoryTodoRepository()
            else:
                app.state.todo_repository, client = MongoTodoRepository.from_settings(settings)

        try:
            yield
        finally:
            if client is not None:
                client.close()
                app.state.todo_repository = None
                logger.info("MongoDB client closed")

    app = FastAPI(
        title="Todo API",
        description="CRUD REST API over a MongoDB collection of todos",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = repository

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(InvalidTodoIdError)
    async def invalid_todo_id_handler(request: Request, exc: InvalidTodoIdError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    app.include_router(api_router)

    return app


app = create_app()
