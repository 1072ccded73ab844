"""Integration tests for app startup and shutdown."""

import asyncio
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.repositories.memory_repository import InMemoryTodoRepository
from todo_api.server import create_app


class TestLifespan:
    """Test how the app builds and releases its store."""

    def test_memory_store_built_at_startup(self):
        """Test TODO_STORE=memory serves without MongoDB."""
        app = create_app(settings=Settings(store_backend="memory"))

        with TestClient(app) as client:
            assert isinstance(app.state.todo_repository, InMemoryTodoRepository)
            todo_id = client.post("/todos", json={"title": "offline"}).json()["id"]
            assert client.get(f"/todos/{todo_id}").json()["title"] == "offline"

    def test_mongo_client_closed_on_shutdown(self):
        """Test the Mongo client built at startup is closed at shutdown."""
        repo = InMemoryTodoRepository()
        mongo_client = Mock()
        settings = Settings(store_backend="mongo")

        with patch(
            "todo_api.server.MongoTodoRepository.from_settings",
            return_value=(repo, mongo_client),
        ) as mock_from_settings:
            app = create_app(settings=settings)
            with TestClient(app) as client:
                assert client.get("/todos").json() == {"todos": []}
                mongo_client.close.assert_not_called()

        mock_from_settings.assert_called_once_with(settings)
        mongo_client.close.assert_called_once()
        assert app.state.todo_repository is None

    def test_mongo_client_closed_when_app_fails(self):
        """Test the Mongo client is closed even if the app errors while running."""
        mongo_client = Mock()

        async def run_and_fail(app):
            async with app.router.lifespan_context(app):
                raise RuntimeError("boom")

        with patch(
            "todo_api.server.MongoTodoRepository.from_settings",
            return_value=(InMemoryTodoRepository(), mongo_client),
        ):
            app = create_app(settings=Settings(store_backend="mongo"))
            with pytest.raises(RuntimeError, match="boom"):
                asyncio.run(run_and_fail(app))

        mongo_client.close.assert_called_once()
        assert app.state.todo_repository is None

    def test_injected_repository_is_used(self):
        """Test an injected repository skips store construction."""
        repo = InMemoryTodoRepository()
        repo.add("preloaded")

        with patch("todo_api.server.MongoTodoRepository.from_settings") as mock_from_settings:
            app = create_app(repository=repo, settings=Settings())
            with TestClient(app) as client:
                titles = [t["title"] for t in client.get("/todos").json()["todos"]]

        assert titles == ["preloaded"]
        mock_from_settings.assert_not_called()

    def test_module_app_reads_environment(self, monkeypatch):
        """Test create_app falls back to environment settings."""
        monkeypatch.setenv("TODO_STORE", "memory")
        monkeypatch.setenv("TODO_PORT", "9999")

        app = create_app()

        assert app.state.settings.store_backend == "memory"
        assert app.state.settings.port == 9999
