"""Infrastructure layer for todokit.

Adapters that implement the domain's ports. Nothing in the domain or
application layers imports from here.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O returning Results
        - InMemoryTodoRepository: Dict-backed TodoRepository
        - JsonTodoRepository: JSON-file-backed TodoRepository
    Wiring:
        - build_repository: Pick a repository from configuration
"""

from todokit.infrastructure.factory import build_repository
from todokit.infrastructure.storage import (
    InMemoryTodoRepository,
    JsonStorage,
    JsonTodoRepository,
)

__all__ = [
    # Storage
    "JsonStorage",
    "InMemoryTodoRepository",
    "JsonTodoRepository",
    # Wiring
    "build_repository",
]
