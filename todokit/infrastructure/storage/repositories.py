"""Repository implementations for the todo aggregate.

Two adapters implement ``TodoRepository``:

- ``InMemoryTodoRepository`` keeps todos in a dict; used by tests and the
  ``memory`` storage mode.
- ``JsonTodoRepository`` persists todos to a single JSON document through
  ``JsonStorage`` and converts storage failures into ``RepositoryError``.

Both evaluate specifications in memory and return todos newest first.
"""

import logging
from pathlib import Path
from typing import Any

from todokit.application.mapper import TodoMapper
from todokit.domain.shared import Err, Ok, Result, Specification, flat_map, is_err
from todokit.domain.todo import (
    ActiveTodoSpecification,
    CompletedTodoSpecification,
    RepositoryError,
    Todo,
    TodoChanges,
    TodoNotFoundError,
    TodoRepository,
    TodoValidationError,
    generate_todo_id,
)
from todokit.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


def _newest_first(todos: list[Todo]) -> list[Todo]:
    return sorted(todos, key=lambda todo: todo.created_at, reverse=True)


class InMemoryTodoRepository(TodoRepository):
    """Dict-backed repository. Not shared between instances."""

    def __init__(self, todos: list[Todo] | None = None) -> None:
        """Initialize the repository.

        Args:
            todos: Todos to seed with. Each must already carry an id.
        """
        self._todos: dict[str, Todo] = {}
        for todo in todos or []:
            if todo.string_id is None:
                raise ValueError("Seed todos must have an id")
            self._todos[todo.string_id] = todo

    def get_all(self) -> list[Todo]:
        return _newest_first(list(self._todos.values()))

    def get_by_id(self, todo_id: str) -> Todo | None:
        return self._todos.get(todo_id)

    def get_active(self) -> list[Todo]:
        return self.find_by_specification(ActiveTodoSpecification())

    def get_completed(self) -> list[Todo]:
        return self.find_by_specification(CompletedTodoSpecification())

    def create(self, todo: Todo) -> str:
        todo_id = generate_todo_id()
        self._todos[todo_id] = todo.with_id(todo_id)
        logger.debug(f"Stored todo {todo_id} in memory")
        return todo_id

    def update(self, todo_id: str, changes: TodoChanges) -> None:
        existing = self._todos.get(todo_id)
        if existing is None:
            raise TodoNotFoundError(todo_id)
        self._todos[todo_id] = changes.apply_to(existing)

    def delete(self, todo_id: str) -> None:
        if self._todos.pop(todo_id, None) is None:
            raise TodoNotFoundError(todo_id)

    def find_by_specification(self, spec: Specification[Todo]) -> list[Todo]:
        return _newest_first(spec.filter(self._todos.values()))

    def clear(self) -> None:
        """Remove every todo."""
        self._todos.clear()


class JsonTodoRepository(TodoRepository):
    """Repository storing all todos in one JSON file.

    The file holds ``{"todos": [<record>, ...]}`` where each record is the
    camelCase form produced by ``TodoMapper.to_record``. A missing file is an
    empty collection. Every operation reads the file; every write rewrites
    it.
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = Path(path)
        self._storage = storage or JsonStorage()

    def _load(self) -> dict[str, Todo]:
        if not self.path.exists():
            return {}

        result = flat_map(self._storage.load_json(self.path), self._decode)
        if is_err(result):
            logger.error(f"Failed to load todos: {result.error}")
            raise RepositoryError(result.error)
        return result.value

    def _decode(self, document: Any) -> Result[dict[str, Todo], str]:
        if not isinstance(document, dict) or not isinstance(document.get("todos", []), list):
            return Err(f'Invalid todo data in {self.path}: expected {{"todos": [...]}}')

        todos: dict[str, Todo] = {}
        for index, record in enumerate(document.get("todos", [])):
            try:
                todo = TodoMapper.from_record(record)
            except (TypeError, ValueError, TodoValidationError) as e:
                # pydantic ValidationError is a ValueError
                return Err(f"Invalid todo data in {self.path}: {e}")
            # Stored records always carry their id
            if todo.string_id is None:
                return Err(f"Invalid todo data in {self.path}: record {index} has no id")
            todos[todo.string_id] = todo
        return Ok(todos)

    def _save(self, todos: dict[str, Todo]) -> None:
        payload = {"todos": [TodoMapper.to_record(todo) for todo in todos.values()]}
        result = self._storage.save_json(self.path, payload)
        if is_err(result):
            logger.error(f"Failed to save todos: {result.error}")
            raise RepositoryError(result.error)

    def get_all(self) -> list[Todo]:
        return _newest_first(list(self._load().values()))

    def get_by_id(self, todo_id: str) -> Todo | None:
        return self._load().get(todo_id)

    def get_active(self) -> list[Todo]:
        return self.find_by_specification(ActiveTodoSpecification())

    def get_completed(self) -> list[Todo]:
        return self.find_by_specification(CompletedTodoSpecification())

    def create(self, todo: Todo) -> str:
        todos = self._load()
        todo_id = generate_todo_id()
        todos[todo_id] = todo.with_id(todo_id)
        self._save(todos)
        logger.debug(f"Wrote todo {todo_id} to {self.path}")
        return todo_id

    def update(self, todo_id: str, changes: TodoChanges) -> None:
        todos = self._load()
        existing = todos.get(todo_id)
        if existing is None:
            raise TodoNotFoundError(todo_id)
        todos[todo_id] = changes.apply_to(existing)
        self._save(todos)

    def delete(self, todo_id: str) -> None:
        todos = self._load()
        if todos.pop(todo_id, None) is None:
            raise TodoNotFoundError(todo_id)
        self._save(todos)

    def find_by_specification(self, spec: Specification[Todo]) -> list[Todo]:
        return _newest_first(spec.filter(self._load().values()))
