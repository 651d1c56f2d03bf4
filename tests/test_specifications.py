# tests/test_specifications.py

from __future__ import annotations

from datetime import timedelta

from todokit.domain.shared import PredicateSpecification
from todokit.domain.todo import (
    ActiveTodoSpecification,
    CompletedTodoSpecification,
    DueBeforeSpecification,
    HighPriorityTodoSpecification,
    OverdueTodoSpecification,
    PriorityTodoSpecification,
    Todo,
    TitleContainsSpecification,
    calculate_urgency_score,
    sort_by_urgency,
)

from .conftest import ID_A, ID_B, ID_C, NOW


def titles(todos: list[Todo]) -> list[str]:
    return [todo.title_value for todo in todos]


def test_active_and_completed_partition_the_collection(sample_todos: list[Todo]) -> None:
    active = ActiveTodoSpecification().filter(sample_todos)
    completed = CompletedTodoSpecification().filter(sample_todos)

    assert titles(active) == ["Water plants", "Call mom"]
    assert titles(completed) == ["File taxes"]
    assert len(active) + len(completed) == len(sample_todos)


def test_priority_specifications(sample_todos: list[Todo]) -> None:
    assert titles(HighPriorityTodoSpecification().filter(sample_todos)) == ["File taxes"]
    assert titles(PriorityTodoSpecification("low").filter(sample_todos)) == ["Water plants"]


def test_overdue_specification_uses_reference_time() -> None:
    stale = Todo(title="Stale", created_at=NOW - timedelta(days=10), id=ID_A)
    fresh = Todo(title="Fresh", created_at=NOW - timedelta(days=1), id=ID_B)

    spec = OverdueTodoSpecification(NOW)
    assert spec.is_satisfied_by(stale)
    assert not spec.is_satisfied_by(fresh)
    assert not OverdueTodoSpecification(NOW - timedelta(days=5)).is_satisfied_by(stale)


def test_due_before_and_title_contains() -> None:
    soon = Todo(title="Pay RENT", created_at=NOW, due_date=NOW + timedelta(days=1), id=ID_A)
    later = Todo(title="Renew passport", created_at=NOW, due_date=NOW + timedelta(days=30), id=ID_B)
    undated = Todo(title="Read book", created_at=NOW, id=ID_C)
    todos = [soon, later, undated]

    assert titles(DueBeforeSpecification(NOW + timedelta(days=7)).filter(todos)) == ["Pay RENT"]
    assert titles(TitleContainsSpecification("ren").filter(todos)) == ["Pay RENT", "Renew passport"]


def test_composition_with_operators(sample_todos: list[Todo]) -> None:
    active_low = ActiveTodoSpecification() & PriorityTodoSpecification("low")
    done_or_medium = CompletedTodoSpecification() | PriorityTodoSpecification("medium")
    not_high = ~HighPriorityTodoSpecification()

    assert titles(active_low.filter(sample_todos)) == ["Water plants"]
    assert titles(done_or_medium.filter(sample_todos)) == ["File taxes", "Call mom"]
    assert titles(not_high.filter(sample_todos)) == ["Water plants", "Call mom"]


def test_method_composition_matches_operators(sample_todos: list[Todo]) -> None:
    spec = ActiveTodoSpecification().and_(HighPriorityTodoSpecification().not_())
    assert titles(spec.filter(sample_todos)) == ["Water plants", "Call mom"]
    assert titles(ActiveTodoSpecification().or_(HighPriorityTodoSpecification()).filter(sample_todos)) == [
        "Water plants",
        "File taxes",
        "Call mom",
    ]


def test_predicate_specification_wraps_callables(sample_todos: list[Todo]) -> None:
    short = PredicateSpecification(lambda todo: len(todo.title_value) <= 8)
    assert titles(short.filter(sample_todos)) == ["Call mom"]


# ---------------------------------------------------------------------------
# Urgency
# ---------------------------------------------------------------------------


def test_urgency_score_grows_with_age_and_caps() -> None:
    fresh_high = Todo(title="Fresh", created_at=NOW, priority="high")
    two_weeks_high = Todo(title="Older", created_at=NOW - timedelta(days=14), priority="high")
    ancient_low = Todo(title="Ancient", created_at=NOW - timedelta(days=365), priority="low")

    assert calculate_urgency_score(fresh_high, NOW) == 3.0
    assert calculate_urgency_score(two_weeks_high, NOW) == 9.0
    assert calculate_urgency_score(ancient_low, NOW) == 4.0
    assert calculate_urgency_score(two_weeks_high.complete(), NOW) == 0.0


def test_sort_by_urgency_puts_completed_last(sample_todos: list[Todo]) -> None:
    ordered = sort_by_urgency(sample_todos, NOW)
    assert titles(ordered) == ["Call mom", "Water plants", "File taxes"]
