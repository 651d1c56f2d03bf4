"""Query handlers: read-only operations over todos.

Handlers never write to the repository. Filtering uses specifications and
runs in memory over the repository's result, which is always correct
regardless of how the repository stores todos.
"""

from datetime import datetime

from todokit.domain.shared import Specification
from todokit.domain.todo import (
    ActiveTodoSpecification,
    CompletedTodoSpecification,
    HighPriorityTodoSpecification,
    OverdueTodoSpecification,
    Todo,
    TodoRepository,
    sort_by_urgency,
    utc_now,
)

from ..dto import (
    GetFilteredTodosQuery,
    GetTodoByIdQuery,
    SortField,
    SortOrder,
    TodoFilter,
    TodoStats,
)

_FILTER_SPECS: dict[TodoFilter, Specification[Todo]] = {
    TodoFilter.ACTIVE: ActiveTodoSpecification(),
    TodoFilter.COMPLETED: CompletedTodoSpecification(),
}


class GetAllTodosQueryHandler:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Todo]:
        return self._repository.get_all()


class GetActiveTodosQueryHandler:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Todo]:
        return self._repository.get_active()


class GetCompletedTodosQueryHandler:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Todo]:
        return self._repository.get_completed()


class GetFilteredTodosQueryHandler:
    """Filter by completion state, then optionally sort.

    Sorting is stable, so todos that compare equal keep repository order.
    Priority sorts by rank (low < medium < high) and ``createdAt``
    chronologically. ``urgency`` puts active todos first, most urgent first;
    ``desc`` reverses that whole order. Without ``sort_by`` the repository
    order is kept as is.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, query: GetFilteredTodosQuery | None = None, now: datetime | None = None) -> list[Todo]:
        query = query or GetFilteredTodosQuery()
        todos = self._repository.get_all()

        spec = _FILTER_SPECS.get(query.filter)
        if spec is not None:
            todos = spec.filter(todos)

        if query.sort_by is None:
            return todos

        reverse = query.sort_order is SortOrder.DESC
        if query.sort_by is SortField.PRIORITY:
            return sorted(todos, key=lambda todo: todo.priority.numeric_value, reverse=reverse)
        if query.sort_by is SortField.CREATED_AT:
            return sorted(todos, key=lambda todo: todo.created_at, reverse=reverse)

        ordered = sort_by_urgency(todos, now or utc_now())
        return ordered[::-1] if reverse else ordered


class GetTodoByIdQueryHandler:
    """Look up a single todo. Absence is not an error here."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, query: GetTodoByIdQuery) -> Todo | None:
        return self._repository.get_by_id(query.id)


class GetTodoStatsQueryHandler:
    """Count todos by state over the full collection."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, now: datetime | None = None) -> TodoStats:
        todos = self._repository.get_all()
        now = now or utc_now()

        return TodoStats(
            total=len(todos),
            active=len(ActiveTodoSpecification().filter(todos)),
            completed=len(CompletedTodoSpecification().filter(todos)),
            overdue=len(OverdueTodoSpecification(now).filter(todos)),
            high_priority=len(HighPriorityTodoSpecification().filter(todos)),
        )


class FindTodosBySpecificationQueryHandler:
    """Run an arbitrary specification through the repository."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, spec: Specification[Todo]) -> list[Todo]:
        return self._repository.find_by_specification(spec)
