# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from todokit.domain.todo import Todo, TodoId

from .fakes import RecordingTodoRepository

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)

ID_A = "a" * 32
ID_B = "b" * 32
ID_C = "c" * 32
UNKNOWN_ID = "f" * 32


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point config and data files at a per-test directory.

    Keeps tests from reading or writing ~/.todokit.
    """
    home = tmp_path / "todokit-home"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("TODOKIT_HOME", str(home))
    monkeypatch.delenv("TODOKIT_DATA_FILE", raising=False)
    monkeypatch.delenv("TODOKIT_STORAGE", raising=False)
    monkeypatch.delenv("TODOKIT_LOG_LEVEL", raising=False)
    return home


@pytest.fixture(autouse=True)
def restore_id_formats(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo any TodoId.register_format calls made by a test."""
    monkeypatch.setattr(TodoId, "_formats", list(TodoId._formats))


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def sample_todos() -> list[Todo]:
    """Three todos created a day apart: low/active, high/completed, medium/active."""
    return [
        Todo(title="Water plants", created_at=NOW - timedelta(days=3), id=ID_A, priority="low"),
        Todo(title="File taxes", completed=True, created_at=NOW - timedelta(days=2), id=ID_B, priority="high"),
        Todo(title="Call mom", created_at=NOW - timedelta(days=1), id=ID_C, priority="medium"),
    ]


@pytest.fixture()
def repo(sample_todos: list[Todo]) -> RecordingTodoRepository:
    return RecordingTodoRepository(sample_todos)


@pytest.fixture()
def empty_repo() -> RecordingTodoRepository:
    return RecordingTodoRepository()
