# tests/test_todo_entity.py

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

import pytest

from todokit.domain.todo import (
    InvalidStateError,
    PriorityLevel,
    Todo,
    TodoAlreadyCompletedError,
    TodoId,
    TodoInvariantError,
    TodoPriority,
    TodoTitle,
)

from .conftest import ID_A, ID_B, NOW


def make_todo(**overrides) -> Todo:
    fields = {"title": "Buy milk", "created_at": NOW, "id": ID_A}
    fields.update(overrides)
    return Todo(**fields)


def test_construction_wraps_raw_values() -> None:
    todo = Todo(title="  Buy milk ", id=ID_A, priority="high")
    assert todo.title == TodoTitle("Buy milk")
    assert todo.id == TodoId(ID_A)
    assert todo.priority == TodoPriority("high")
    assert todo.completed is False
    assert todo.due_date is None
    assert todo.created_at.tzinfo is not None


def test_defaults_are_active_medium_without_id() -> None:
    todo = Todo(title="Buy milk")
    assert todo.id is None
    assert todo.string_id is None
    assert todo.priority_level is PriorityLevel.MEDIUM


def test_naive_datetimes_are_treated_as_utc() -> None:
    todo = Todo(title="Buy milk", created_at=datetime(2026, 1, 1, 9, 0))
    assert todo.created_at == datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


def test_entity_is_frozen() -> None:
    todo = make_todo()
    with pytest.raises(dataclasses.FrozenInstanceError):
        todo.completed = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def test_toggle_returns_new_instance_and_leaves_original_untouched() -> None:
    original = make_todo()
    toggled = original.toggle()

    assert toggled is not original
    assert toggled.completed is True
    assert original.completed is False


@pytest.mark.parametrize("completed", [True, False])
def test_toggle_twice_is_identity(completed: bool) -> None:
    todo = make_todo(completed=completed)
    assert todo.toggle().toggle().completed is completed
    assert todo.toggle().toggle() == todo


def test_complete_active_todo() -> None:
    todo = make_todo()
    assert todo.can_be_completed()

    completed = todo.complete()
    assert completed.completed is True
    assert not completed.can_be_completed()
    assert todo.completed is False


def test_complete_already_completed_todo_fails() -> None:
    todo = make_todo(completed=True)
    with pytest.raises(TodoAlreadyCompletedError) as exc_info:
        todo.complete()
    assert isinstance(exc_info.value, InvalidStateError)
    assert exc_info.value.code == "TODO_ALREADY_COMPLETED"


def test_toggle_never_fails_on_completed_todo() -> None:
    assert make_todo(completed=True).toggle().completed is False


def test_updates_replace_one_field_and_keep_the_rest() -> None:
    due = NOW + timedelta(days=2)
    todo = make_todo(priority="low", due_date=due)

    retitled = todo.update_title("Buy oat milk")
    assert retitled.title_value == "Buy oat milk"
    assert (retitled.priority, retitled.due_date, retitled.id, retitled.created_at) == (
        todo.priority,
        todo.due_date,
        todo.id,
        todo.created_at,
    )

    reprioritized = todo.update_priority("high")
    assert reprioritized.priority_level is PriorityLevel.HIGH
    assert reprioritized.title == todo.title

    cleared = todo.update_due_date(None)
    assert cleared.due_date is None
    assert cleared.priority == todo.priority
    assert todo.due_date == due


def test_with_id_assigns_identity() -> None:
    todo = Todo(title="Buy milk", created_at=NOW)
    assert todo.with_id(ID_B).string_id == ID_B
    assert todo.id is None


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


def test_equals_compares_by_id_only() -> None:
    assert make_todo(title="One").equals(make_todo(title="Two", completed=True))
    assert not make_todo(id=ID_A).equals(make_todo(id=ID_B))


def test_todos_without_id_are_never_equal() -> None:
    todo = Todo(title="Buy milk", created_at=NOW)
    assert not todo.equals(todo)
    assert not todo.equals(make_todo())


# ---------------------------------------------------------------------------
# Overdue
# ---------------------------------------------------------------------------


def test_overdue_when_older_than_seven_days_without_due_date() -> None:
    todo = make_todo(created_at=NOW - timedelta(days=8))
    assert todo.is_overdue(NOW)
    assert not todo.complete().is_overdue(NOW)


def test_not_overdue_at_exactly_seven_days() -> None:
    todo = make_todo(created_at=NOW - timedelta(days=7))
    assert not todo.is_overdue(NOW)


def test_overdue_follows_due_date_when_present() -> None:
    old = NOW - timedelta(days=30)
    assert make_todo(created_at=old, due_date=NOW - timedelta(minutes=1)).is_overdue(NOW)
    # A future due date wins over the age rule
    assert not make_todo(created_at=old, due_date=NOW + timedelta(days=1)).is_overdue(NOW)


@pytest.mark.parametrize("age_days", [0, 8, 100])
@pytest.mark.parametrize("due_offset", [None, -5, 5])
def test_completed_todos_are_never_overdue(age_days: int, due_offset: int | None) -> None:
    due = NOW + timedelta(days=due_offset) if due_offset is not None else None
    todo = make_todo(completed=True, created_at=NOW - timedelta(days=age_days), due_date=due)
    assert not todo.is_overdue(NOW)


def test_overdue_defaults_to_current_time() -> None:
    todo = Todo(title="Ancient", created_at=datetime(2000, 1, 1, tzinfo=UTC))
    assert todo.is_overdue()


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


def test_validate_passes_for_consistent_todo() -> None:
    make_todo(due_date=NOW + timedelta(days=1)).validate()
    make_todo(due_date=NOW).validate()


def test_validate_rejects_due_date_before_creation() -> None:
    todo = make_todo().update_due_date(NOW - timedelta(seconds=1))
    with pytest.raises(TodoInvariantError, match="Due date cannot be before creation date"):
        todo.validate()
