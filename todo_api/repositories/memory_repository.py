"""Todo repository - in-memory implementation."""

import threading
from typing import Dict, List, Optional

from todo_api.models.domain import Todo
from todo_api.repositories.base import TodoRepository
from todo_api.utils.ids import new_todo_id, parse_todo_id


class InMemoryTodoRepository(TodoRepository):
    """
    Repository for todos kept in process memory.

    Used by tests and by store-less local runs (TODO_STORE=memory).
    Data is lost on restart. Ids follow the ObjectId format so clients see
    the same behaviour as against MongoDB.
    """

    def __init__(self):
        self._todos: Dict[str, Todo] = {}
        self._lock = threading.Lock()

    def add(self, title: str, done: bool = False) -> Todo:
        todo = Todo(id=new_todo_id(), title=title, done=done)
        with self._lock:
            self._todos[todo.id] = todo
        return Todo(id=todo.id, title=todo.title, done=todo.done)

    def get(self, todo_id: str) -> Optional[Todo]:
        key = str(parse_todo_id(todo_id))
        with self._lock:
            todo = self._todos.get(key)
            if todo is None:
                return None
            return Todo(id=todo.id, title=todo.title, done=todo.done)

    def list(self) -> List[Todo]:
        with self._lock:
            return [Todo(id=t.id, title=t.title, done=t.done) for t in self._todos.values()]

    def update(self, todo_id: str, title: str, done: bool) -> bool:
        key = str(parse_todo_id(todo_id))
        with self._lock:
            todo = self._todos.get(key)
            if todo is None:
                return False
            todo.title = title
            todo.done = done
            return True

    def delete(self, todo_id: str) -> bool:
        key = str(parse_todo_id(todo_id))
        with self._lock:
            return self._todos.pop(key, None) is not None
