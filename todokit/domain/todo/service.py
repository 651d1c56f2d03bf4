"""Todo rules that span more than one entity.

All functions are pure - no I/O, no side effects.
"""

from collections.abc import Iterable
from datetime import datetime

from .models import OVERDUE_AFTER, Todo, ensure_utc, utc_now

# Age stops adding urgency after this many OVERDUE_AFTER periods
MAX_AGE_WEIGHT = 3.0


def calculate_urgency_score(todo: Todo, now: datetime | None = None) -> float:
    """Score how urgently a todo needs attention.

    Completed todos score 0. Otherwise the priority rank is multiplied by an
    age factor that grows by 1 per week of age, capped at ``MAX_AGE_WEIGHT``.

    Args:
        todo: Todo to score.
        now: Reference time, defaults to the current UTC time.

    Returns:
        Urgency score, higher is more urgent.

    Example:
        A high priority todo created 14 days ago scores 3 * (1 + 2) = 9.0
    """
    if todo.completed:
        return 0.0

    now = ensure_utc(now) if now is not None else utc_now()
    age_days = (now - todo.created_at).days
    age_weight = min(age_days / OVERDUE_AFTER.days, MAX_AGE_WEIGHT)
    return todo.priority.numeric_value * (1 + age_weight)


def sort_by_urgency(todos: Iterable[Todo], now: datetime | None = None) -> list[Todo]:
    """Sort active todos first, then by urgency score, highest first."""
    now = ensure_utc(now) if now is not None else utc_now()
    return sorted(
        todos,
        key=lambda todo: (todo.completed, -calculate_urgency_score(todo, now)),
    )
