"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.repositories.memory_repository import InMemoryTodoRepository
from todo_api.server import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for key in (
        "MONGO_URL",
        "TODO_DB_NAME",
        "TODO_COLLECTION",
        "TODO_STORE",
        "TODO_HOST",
        "TODO_PORT",
        "MONGO_TIMEOUT_MS",
        "TODO_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def memory_settings():
    """Settings for a store-less run."""
    return Settings(store_backend="memory")


@pytest.fixture
def todo_repo():
    """Fresh in-memory repository."""
    return InMemoryTodoRepository()


@pytest.fixture
def client(todo_repo, memory_settings):
    """Test client serving from the in-memory repository."""
    app = create_app(repository=todo_repo, settings=memory_settings)
    with TestClient(app) as test_client:
        yield test_client
