"""Storage infrastructure for todokit.

Provides ``TodoRepository`` implementations and the JSON file I/O they use.
"""

from todokit.infrastructure.storage.json_storage import JsonStorage
from todokit.infrastructure.storage.repositories import (
    InMemoryTodoRepository,
    JsonTodoRepository,
)

__all__ = [
    "JsonStorage",
    "InMemoryTodoRepository",
    "JsonTodoRepository",
]
