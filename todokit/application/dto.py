"""Commands, queries and result types for the todo use cases.

Commands and queries are plain frozen dataclasses; they carry already
shape-checked data (see ``todokit.application.validation``). Result and
transport types are Pydantic models so they serialize directly.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from todokit.domain.todo import PriorityLevel


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True)
class CreateTodoCommand:
    title: str
    priority: PriorityLevel | None = None
    due_date: datetime | None = None


@dataclass(frozen=True)
class UpdateTodoCommand:
    """Partial update. Fields left as None are not touched.

    ``clear_due_date`` removes an existing due date; it wins over
    ``due_date`` if both are given.
    """

    id: str
    title: str | None = None
    completed: bool | None = None
    priority: PriorityLevel | None = None
    due_date: datetime | None = None
    clear_due_date: bool = False


@dataclass(frozen=True)
class DeleteTodoCommand:
    id: str


@dataclass(frozen=True)
class ToggleTodoCommand:
    id: str


@dataclass(frozen=True)
class CompleteTodoCommand:
    id: str


# =============================================================================
# Queries
# =============================================================================


class TodoFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortField(str, Enum):
    PRIORITY = "priority"
    CREATED_AT = "createdAt"
    URGENCY = "urgency"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class GetFilteredTodosQuery:
    """Filter plus optional sort.

    Plain strings are accepted and converted to the enums; unknown values
    raise ``ValueError``.
    """

    filter: TodoFilter = TodoFilter.ALL
    sort_by: SortField | None = None
    sort_order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "filter", TodoFilter(self.filter))
        if self.sort_by is not None:
            object.__setattr__(self, "sort_by", SortField(self.sort_by))
        object.__setattr__(self, "sort_order", SortOrder(self.sort_order))


@dataclass(frozen=True)
class GetTodoByIdQuery:
    id: str


# =============================================================================
# Results
# =============================================================================


class TodoStats(BaseModel):
    """Counts over the full todo collection."""

    total: int
    active: int
    completed: int
    overdue: int = 0
    high_priority: int = 0

    @property
    def completion_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)


class TodoDto(BaseModel):
    """Transport record for a todo.

    All fields are primitives; dates are ISO-8601 strings. Serialized with
    camelCase keys (``model_dump(by_alias=True)``), constructed from either
    form.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    title: str
    completed: bool = False
    priority: str = PriorityLevel.MEDIUM.value
    created_at: str = Field(alias="createdAt")
    due_date: str | None = Field(default=None, alias="dueDate")
