"""Todo aggregate.

``Todo`` is an immutable entity. Every state change returns a new instance
built with ``dataclasses.replace``; earlier instances stay valid and can be
shared freely (for undo, audit, or comparison).
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

from .exceptions import TodoAlreadyCompletedError, TodoInvariantError
from .value_objects import PriorityLevel, TodoId, TodoPriority, TodoTitle

# Todos without a due date count as overdue once they are older than this
OVERDUE_AFTER = timedelta(days=7)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(moment: datetime) -> datetime:
    """Interpret naive datetimes as UTC; convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


@dataclass(frozen=True)
class Todo:
    """A single todo item.

    Raw values are accepted for convenience and wrapped on construction:
    ``title`` may be a ``str``, ``id`` a ``str`` and ``priority`` a ``str`` or
    ``PriorityLevel``. Construction does not check cross-field invariants;
    call ``validate()`` for that (use cases do so after every mutation).

    Attributes:
        title: Validated title.
        completed: Completion flag.
        created_at: Creation time (UTC).
        id: Repository-assigned identifier, None until persisted.
        priority: Priority, medium by default.
        due_date: Optional deadline (UTC).
    """

    title: TodoTitle
    completed: bool = False
    created_at: datetime = field(default_factory=utc_now)
    id: TodoId | None = None
    priority: TodoPriority = field(default_factory=TodoPriority)
    due_date: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, TodoTitle):
            object.__setattr__(self, "title", TodoTitle(self.title))
        if self.id is not None and not isinstance(self.id, TodoId):
            object.__setattr__(self, "id", TodoId(self.id))
        if not isinstance(self.priority, TodoPriority):
            object.__setattr__(self, "priority", TodoPriority(self.priority))
        object.__setattr__(self, "completed", bool(self.completed))
        object.__setattr__(self, "created_at", ensure_utc(self.created_at))
        if self.due_date is not None:
            object.__setattr__(self, "due_date", ensure_utc(self.due_date))

    # -------------------------------------------------------------------------
    # Convenience accessors
    # -------------------------------------------------------------------------

    @property
    def title_value(self) -> str:
        return self.title.value

    @property
    def priority_level(self) -> PriorityLevel:
        return self.priority.level

    @property
    def string_id(self) -> str | None:
        return self.id.value if self.id is not None else None

    # -------------------------------------------------------------------------
    # State transitions (all return new instances)
    # -------------------------------------------------------------------------

    def toggle(self) -> "Todo":
        """Flip the completion flag. Never fails."""
        return replace(self, completed=not self.completed)

    def complete(self) -> "Todo":
        """Mark the todo completed.

        Unlike ``toggle``, this refuses to act on a todo that is already
        completed instead of silently doing nothing.

        Raises:
            TodoAlreadyCompletedError: If the todo is already completed.
        """
        if not self.can_be_completed():
            raise TodoAlreadyCompletedError()
        return replace(self, completed=True)

    def update_title(self, title: "str | TodoTitle") -> "Todo":
        return replace(self, title=title if isinstance(title, TodoTitle) else TodoTitle(title))

    def update_priority(self, priority: "str | PriorityLevel | TodoPriority") -> "Todo":
        if not isinstance(priority, TodoPriority):
            priority = TodoPriority(priority)
        return replace(self, priority=priority)

    def update_due_date(self, due_date: datetime | None) -> "Todo":
        """Replace the due date; ``None`` clears it."""
        return replace(self, due_date=due_date)

    def with_id(self, todo_id: "str | TodoId") -> "Todo":
        """Return a copy carrying a repository-assigned id."""
        return replace(self, id=todo_id)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def can_be_completed(self) -> bool:
        return not self.completed

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Check whether the todo is overdue.

        Completed todos are never overdue. A todo with a due date is overdue
        once that date has passed; one without a due date is overdue once it
        is older than ``OVERDUE_AFTER``.

        Args:
            now: Reference time, defaults to the current UTC time.
        """
        if self.completed:
            return False

        now = ensure_utc(now) if now is not None else utc_now()
        if self.due_date is not None:
            return now > self.due_date
        return now - self.created_at > OVERDUE_AFTER

    def equals(self, other: "Todo") -> bool:
        """Identity comparison: same id. Todos without an id never match."""
        if self.id is None or other.id is None:
            return False
        return self.id.equals(other.id)

    def validate(self) -> None:
        """Check business invariants.

        Raises:
            TodoInvariantError: If the title is blank or the due date
                precedes the creation date.
        """
        if self.title is None or not self.title.value.strip():
            raise TodoInvariantError("Todo must have a valid title")

        if self.due_date is not None and self.due_date < self.created_at:
            raise TodoInvariantError("Due date cannot be before creation date")
