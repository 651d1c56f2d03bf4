"""Application layer for todokit.

This package orchestrates the todo domain: use cases that load, transform
and persist todos through a ``TodoRepository``, the shape validation run
before them, and the mapper to transport records.

Modules:
    dto - Commands, queries, results and the TodoDto transport record
    use_cases - Command use cases and query handlers
    validation - Pydantic-based payload validation
    mapper - Todo <-> TodoDto translation
    service - Validation + use case facades used by the CLI and HTTP API

Example usage:
    >>> from todokit.application import TodoCommandService, TodoQueryService
    >>> from todokit.infrastructure.storage import InMemoryTodoRepository
    >>>
    >>> repository = InMemoryTodoRepository()
    >>> todo = TodoCommandService(repository).create_todo({"title": "Buy milk"})
    >>> TodoQueryService(repository).get_stats().active
    1
"""

from todokit.application.dto import (
    CompleteTodoCommand,
    CreateTodoCommand,
    DeleteTodoCommand,
    GetFilteredTodosQuery,
    GetTodoByIdQuery,
    SortField,
    SortOrder,
    TodoDto,
    TodoFilter,
    TodoStats,
    ToggleTodoCommand,
    UpdateTodoCommand,
)
from todokit.application.mapper import TodoMapper
from todokit.application.service import TodoCommandService, TodoQueryService
from todokit.application.validation import (
    CommandValidationError,
    TodoValidationService,
    ValidationIssue,
)

__all__ = [
    # Commands and queries
    "CreateTodoCommand",
    "UpdateTodoCommand",
    "DeleteTodoCommand",
    "ToggleTodoCommand",
    "CompleteTodoCommand",
    "GetFilteredTodosQuery",
    "GetTodoByIdQuery",
    "TodoFilter",
    "SortField",
    "SortOrder",
    # Results
    "TodoStats",
    "TodoDto",
    # Mapping and validation
    "TodoMapper",
    "TodoValidationService",
    "CommandValidationError",
    "ValidationIssue",
    # Services
    "TodoCommandService",
    "TodoQueryService",
]
