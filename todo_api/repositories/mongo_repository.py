"""Todo repository - MongoDB implementation."""

import logging
from typing import Any, List, Mapping, Optional, Tuple

from pymongo import MongoClient
from pymongo.collection import Collection

from todo_api.config import Settings
from todo_api.models.domain import Todo
from todo_api.repositories.base import TodoRepository
from todo_api.utils.ids import parse_todo_id

logger = logging.getLogger(__name__)


class MongoTodoRepository(TodoRepository):
    """
    Repository for todos stored in a MongoDB collection.

    Documents look like {"_id": ObjectId, "title": str, "done": bool}.
    Atomicity is whatever MongoDB gives a single-document operation.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> Tuple["MongoTodoRepository", MongoClient]:
        """Build a repository and the client backing it.

        The caller owns the returned client and must close it. MongoClient
        connects lazily, so this does not fail when the server is down.
        """
        client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        )
        collection = client[settings.database_name][settings.collection_name]
        logger.info(
            "Using MongoDB at %s (db=%s, collection=%s)",
            settings.redacted_mongo_url,
            settings.database_name,
            settings.collection_name,
        )
        return cls(collection), client

    def add(self, title: str, done: bool = False) -> Todo:
        result = self.collection.insert_one({"title": title, "done": done})
        return Todo(id=str(result.inserted_id), title=title, done=done)

    def get(self, todo_id: str) -> Optional[Todo]:
        document = self.collection.find_one({"_id": parse_todo_id(todo_id)})
        if document is None:
            return None
        return self._to_entity(document)

    def list(self) -> List[Todo]:
        return [self._to_entity(document) for document in self.collection.find()]

    def update(self, todo_id: str, title: str, done: bool) -> bool:
        result = self.collection.update_one(
            {"_id": parse_todo_id(todo_id)},
            {"$set": {"title": title, "done": done}},
        )
        return result.matched_count > 0

    def delete(self, todo_id: str) -> bool:
        result = self.collection.delete_one({"_id": parse_todo_id(todo_id)})
        return result.deleted_count > 0

    @staticmethod
    def _to_entity(document: Mapping[str, Any]) -> Todo:
        """Convert a stored document to a domain entity."""
        return Todo(
            id=str(document["_id"]),
            title=document.get("title") or "",
            done=bool(document.get("done", False)),
        )
