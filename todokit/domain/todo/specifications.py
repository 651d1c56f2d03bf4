"""Todo specifications.

Ready-made predicates over ``Todo`` used by the query handlers. They
compose with ``&``, ``|`` and ``~`` (see ``todokit.domain.shared``).
"""

from datetime import datetime

from todokit.domain.shared.specification import Specification

from .models import Todo, ensure_utc
from .value_objects import PriorityLevel, TodoPriority


class CompletedTodoSpecification(Specification[Todo]):
    def is_satisfied_by(self, candidate: Todo) -> bool:
        return candidate.completed


class ActiveTodoSpecification(Specification[Todo]):
    def is_satisfied_by(self, candidate: Todo) -> bool:
        return not candidate.completed


class OverdueTodoSpecification(Specification[Todo]):
    """Todos for which ``Todo.is_overdue`` holds at a fixed reference time.

    Args:
        now: Reference time. Defaults to the time of each evaluation.
    """

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now

    def is_satisfied_by(self, candidate: Todo) -> bool:
        return candidate.is_overdue(self.now)


class HighPriorityTodoSpecification(Specification[Todo]):
    def is_satisfied_by(self, candidate: Todo) -> bool:
        return candidate.priority.is_high()


class PriorityTodoSpecification(Specification[Todo]):
    """Todos with exactly the given priority level."""

    def __init__(self, level: str | PriorityLevel) -> None:
        self.priority = TodoPriority(level)

    def is_satisfied_by(self, candidate: Todo) -> bool:
        return candidate.priority.equals(self.priority)


class DueBeforeSpecification(Specification[Todo]):
    """Todos with a due date strictly before ``moment``."""

    def __init__(self, moment: datetime) -> None:
        self.moment = ensure_utc(moment)

    def is_satisfied_by(self, candidate: Todo) -> bool:
        return candidate.due_date is not None and candidate.due_date < self.moment


class TitleContainsSpecification(Specification[Todo]):
    """Case-insensitive substring match on the title."""

    def __init__(self, text: str) -> None:
        self.text = text.casefold()

    def is_satisfied_by(self, candidate: Todo) -> bool:
        return self.text in candidate.title_value.casefold()
