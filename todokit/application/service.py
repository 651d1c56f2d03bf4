"""Application services: the entry points transport layers call.

Each method takes a raw payload, runs it through shape validation, and
hands the resulting command to the matching use case. Errors propagate as
raised; the services only log.
"""

import logging
from typing import Any

from todokit.domain.shared import Specification
from todokit.domain.todo import Todo, TodoRepository

from .dto import (
    CompleteTodoCommand,
    GetFilteredTodosQuery,
    GetTodoByIdQuery,
    TodoStats,
)
from .use_cases import (
    CompleteTodoUseCase,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    FindTodosBySpecificationQueryHandler,
    GetActiveTodosQueryHandler,
    GetAllTodosQueryHandler,
    GetCompletedTodosQueryHandler,
    GetFilteredTodosQueryHandler,
    GetTodoByIdQueryHandler,
    GetTodoStatsQueryHandler,
    ToggleTodoUseCase,
    UpdateTodoUseCase,
)
from .validation import TodoValidationService

logger = logging.getLogger(__name__)


class TodoCommandService:
    """Write side: validate, then run the command use case."""

    def __init__(
        self,
        repository: TodoRepository,
        validation: TodoValidationService | None = None,
    ) -> None:
        self._validation = validation or TodoValidationService()
        self._create = CreateTodoUseCase(repository)
        self._update = UpdateTodoUseCase(repository)
        self._delete = DeleteTodoUseCase(repository)
        self._toggle = ToggleTodoUseCase(repository)
        self._complete = CompleteTodoUseCase(repository)

    def create_todo(self, data: dict[str, Any]) -> Todo:
        command = self._validation.validate_create_command(data)
        todo = self._create.execute(command)
        logger.info(f"Created todo {todo.string_id}")
        return todo

    def update_todo(self, todo_id: str, data: dict[str, Any]) -> Todo:
        command = self._validation.validate_update_command({**data, "id": todo_id})
        todo = self._update.execute(command)
        logger.info(f"Updated todo {todo_id}")
        return todo

    def delete_todo(self, todo_id: str) -> None:
        command = self._validation.validate_delete_command({"id": todo_id})
        self._delete.execute(command)
        logger.info(f"Deleted todo {todo_id}")

    def toggle_todo(self, todo_id: str) -> Todo:
        command = self._validation.validate_toggle_command({"id": todo_id})
        todo = self._toggle.execute(command)
        logger.info(f"Toggled todo {todo_id} (completed={todo.completed})")
        return todo

    def complete_todo(self, todo_id: str) -> Todo:
        command: CompleteTodoCommand = self._validation.validate_complete_command({"id": todo_id})
        todo = self._complete.execute(command)
        logger.info(f"Completed todo {todo_id}")
        return todo


class TodoQueryService:
    """Read side: wraps the query handlers."""

    def __init__(self, repository: TodoRepository) -> None:
        self._all = GetAllTodosQueryHandler(repository)
        self._active = GetActiveTodosQueryHandler(repository)
        self._completed = GetCompletedTodosQueryHandler(repository)
        self._filtered = GetFilteredTodosQueryHandler(repository)
        self._by_id = GetTodoByIdQueryHandler(repository)
        self._stats = GetTodoStatsQueryHandler(repository)
        self._by_spec = FindTodosBySpecificationQueryHandler(repository)

    def get_all(self) -> list[Todo]:
        return self._all.execute()

    def get_active(self) -> list[Todo]:
        return self._active.execute()

    def get_completed(self) -> list[Todo]:
        return self._completed.execute()

    def get_filtered(
        self,
        filter: str = "all",
        sort_by: str | None = None,
        sort_order: str = "asc",
    ) -> list[Todo]:
        """Filter and sort.

        Raises:
            ValueError: If a filter, sort field or sort order is unknown.
        """
        query = GetFilteredTodosQuery(filter=filter, sort_by=sort_by, sort_order=sort_order)
        logger.debug(f"Querying todos: {query}")
        return self._filtered.execute(query)

    def get_by_id(self, todo_id: str) -> Todo | None:
        return self._by_id.execute(GetTodoByIdQuery(id=todo_id))

    def get_stats(self) -> TodoStats:
        return self._stats.execute()

    def find(self, spec: Specification[Todo]) -> list[Todo]:
        return self._by_spec.execute(spec)
