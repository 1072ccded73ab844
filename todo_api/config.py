"""Environment configuration for the todo service.

Single source of truth for store and server settings. Every value can be
overridden through an environment variable so the service runs unchanged in
containers.

Usage:
    from todo_api.config import Settings

    settings = Settings.from_env()
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from todo_api.exceptions import ConfigError


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_MONGO_URL = "mongodb://localhost:27017"
DEFAULT_DATABASE_NAME = "keploy_todos"
DEFAULT_COLLECTION_NAME = "todos"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4567
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_LOG_LEVEL = "INFO"

STORE_MONGO = "mongo"
STORE_MEMORY = "memory"
STORE_BACKENDS = (STORE_MONGO, STORE_MEMORY)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# SETTINGS
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Runtime settings for the todo service."""
    mongo_url: str = DEFAULT_MONGO_URL
    database_name: str = DEFAULT_DATABASE_NAME
    collection_name: str = DEFAULT_COLLECTION_NAME
    store_backend: str = STORE_MONGO
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    server_selection_timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.store_backend not in STORE_BACKENDS:
            raise ConfigError(
                f"Unknown store backend: {self.store_backend}. "
                f"Allowed: {', '.join(STORE_BACKENDS)}"
            )
        if not 0 < self.port < 65536:
            raise ConfigError(f"Port out of range: {self.port}")
        if self.server_selection_timeout_ms <= 0:
            raise ConfigError(
                f"Mongo timeout must be positive: {self.server_selection_timeout_ms}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {self.log_level}. "
                f"Allowed: {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Create settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigError: If a value cannot be parsed or is out of range.
        """
        env = os.environ if environ is None else environ
        return cls(
            mongo_url=env.get("MONGO_URL", DEFAULT_MONGO_URL),
            database_name=env.get("TODO_DB_NAME", DEFAULT_DATABASE_NAME),
            collection_name=env.get("TODO_COLLECTION", DEFAULT_COLLECTION_NAME),
            store_backend=env.get("TODO_STORE", STORE_MONGO).strip().lower(),
            host=env.get("TODO_HOST", DEFAULT_HOST),
            port=_get_int(env, "TODO_PORT", DEFAULT_PORT),
            server_selection_timeout_ms=_get_int(env, "MONGO_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            log_level=env.get("TODO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def redacted_mongo_url(self) -> str:
        """Mongo URL with any password masked, safe for logs."""
        return redact_url(self.mongo_url)


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = env.get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from None


def redact_url(url: str) -> str:
    """Replace the password component of a connection URL with '***'."""
    parts = urlsplit(url)
    if not parts.password:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))
