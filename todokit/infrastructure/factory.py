"""Repository selection from configuration."""

import logging

from todokit.config import StorageKind, TodokitConfig
from todokit.domain.todo import TodoRepository
from todokit.infrastructure.storage import InMemoryTodoRepository, JsonTodoRepository

logger = logging.getLogger(__name__)


def build_repository(config: TodokitConfig) -> TodoRepository:
    """Create the repository named by ``config.storage``."""
    if config.storage is StorageKind.MEMORY:
        logger.info("Using in-memory todo storage")
        return InMemoryTodoRepository()

    logger.info(f"Using JSON todo storage at {config.data_file}")
    return JsonTodoRepository(config.data_file)
