"""Todo HTTP service.

A small REST API over a single MongoDB collection of todo records:
- Create, list, fetch, replace and delete todos
- Health check independent of the store
- In-memory store for local runs and tests

Usage:
    ./start_server.py               # From repo root
    uvicorn todo_api.server:app     # Settings from the environment
"""

__version__ = "1.0.0"
