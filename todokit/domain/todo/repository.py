"""Repository port for todos.

The use cases depend only on ``TodoRepository``. Concrete adapters live in
``todokit.infrastructure.storage``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from todokit.domain.shared.specification import Specification

from .models import Todo
from .value_objects import TodoPriority, TodoTitle


@dataclass(frozen=True)
class TodoChanges:
    """Partial update payload for ``TodoRepository.update``.

    ``None`` means "leave unchanged". Because ``None`` cannot also mean
    "remove the due date", clearing it is requested with ``clear_due_date``.
    """

    title: TodoTitle | None = None
    completed: bool | None = None
    priority: TodoPriority | None = None
    due_date: datetime | None = None
    clear_due_date: bool = False

    def apply_to(self, todo: Todo) -> Todo:
        """Return ``todo`` with these changes applied."""
        updated = todo
        if self.title is not None:
            updated = updated.update_title(self.title)
        if self.completed is not None and self.completed != updated.completed:
            updated = updated.toggle()
        if self.priority is not None:
            updated = updated.update_priority(self.priority)
        if self.clear_due_date:
            updated = updated.update_due_date(None)
        elif self.due_date is not None:
            updated = updated.update_due_date(self.due_date)
        return updated

    def is_empty(self) -> bool:
        return (
            self.title is None
            and self.completed is None
            and self.priority is None
            and self.due_date is None
            and not self.clear_due_date
        )


class TodoRepository(ABC):
    """Storage capability consumed by the use cases.

    Implementations may raise ``RepositoryError`` for storage failures; the
    use cases propagate it unchanged.
    """

    @abstractmethod
    def get_all(self) -> list[Todo]:
        """Return every todo in a stable, repository-defined order."""

    @abstractmethod
    def get_by_id(self, todo_id: str) -> Todo | None:
        """Return the todo with this id, or None."""

    @abstractmethod
    def get_active(self) -> list[Todo]:
        """Return todos that are not completed."""

    @abstractmethod
    def get_completed(self) -> list[Todo]:
        """Return completed todos."""

    @abstractmethod
    def create(self, todo: Todo) -> str:
        """Persist a new todo and return the id assigned to it."""

    @abstractmethod
    def update(self, todo_id: str, changes: TodoChanges) -> None:
        """Apply a partial update.

        Raises:
            TodoNotFoundError: If the id is unknown.
        """

    @abstractmethod
    def delete(self, todo_id: str) -> None:
        """Remove a todo.

        Raises:
            TodoNotFoundError: If the id is unknown.
        """

    @abstractmethod
    def find_by_specification(self, spec: Specification[Todo]) -> list[Todo]:
        """Return todos satisfying ``spec``."""
