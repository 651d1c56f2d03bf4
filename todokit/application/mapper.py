"""Translation between ``Todo`` entities and transport records."""

from datetime import datetime
from typing import Any

from todokit.domain.todo import Todo

from .dto import TodoDto


def _to_iso(moment: datetime | None) -> str | None:
    return moment.isoformat() if moment is not None else None


def _from_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class TodoMapper:
    """Stateless mapper. Absent id and due date map to ``None`` both ways."""

    @staticmethod
    def to_dto(todo: Todo) -> TodoDto:
        return TodoDto(
            id=todo.string_id,
            title=todo.title_value,
            completed=todo.completed,
            priority=todo.priority_level.value,
            created_at=todo.created_at.isoformat(),
            due_date=_to_iso(todo.due_date),
        )

    @staticmethod
    def to_dto_list(todos: list[Todo]) -> list[TodoDto]:
        return [TodoMapper.to_dto(todo) for todo in todos]

    @staticmethod
    def to_domain(dto: TodoDto) -> Todo:
        """Rebuild an entity from a transport record.

        Raises:
            TodoValidationError: If a field fails value object validation.
            ValueError: If a date string is not ISO-8601.
        """
        return Todo(
            title=dto.title,
            completed=dto.completed,
            created_at=datetime.fromisoformat(dto.created_at),
            id=dto.id or None,
            priority=dto.priority,
            due_date=_from_iso(dto.due_date),
        )

    @staticmethod
    def to_record(todo: Todo) -> dict[str, Any]:
        """Plain dict form with camelCase keys, used for JSON storage."""
        return TodoMapper.to_dto(todo).model_dump(by_alias=True)

    @staticmethod
    def from_record(record: dict[str, Any]) -> Todo:
        return TodoMapper.to_domain(TodoDto.model_validate(record))
