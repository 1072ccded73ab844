"""Unit tests for logging setup."""

import logging

from todo_api.logging_config import configure_logging


def test_configure_logging_sets_level_once():
    """Test repeated calls update the level without stacking handlers."""
    logger = logging.getLogger("todo_api")
    original_handlers = list(logger.handlers)
    try:
        configure_logging("debug")
        configure_logging("WARNING")

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == max(1, len(original_handlers))
        assert logger.propagate is False
    finally:
        logger.handlers = original_handlers
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
