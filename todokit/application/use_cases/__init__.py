"""Todo use cases, split into commands (writes) and queries (reads)."""

from todokit.application.use_cases.commands import (
    CompleteTodoUseCase,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    ToggleTodoUseCase,
    UpdateTodoUseCase,
)
from todokit.application.use_cases.queries import (
    FindTodosBySpecificationQueryHandler,
    GetActiveTodosQueryHandler,
    GetAllTodosQueryHandler,
    GetCompletedTodosQueryHandler,
    GetFilteredTodosQueryHandler,
    GetTodoByIdQueryHandler,
    GetTodoStatsQueryHandler,
)

__all__ = [
    # Commands
    "CreateTodoUseCase",
    "UpdateTodoUseCase",
    "DeleteTodoUseCase",
    "ToggleTodoUseCase",
    "CompleteTodoUseCase",
    # Queries
    "GetAllTodosQueryHandler",
    "GetActiveTodosQueryHandler",
    "GetCompletedTodosQueryHandler",
    "GetFilteredTodosQueryHandler",
    "GetTodoByIdQueryHandler",
    "GetTodoStatsQueryHandler",
    "FindTodosBySpecificationQueryHandler",
]
