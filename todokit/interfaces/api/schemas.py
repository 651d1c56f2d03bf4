"""Response schemas for the todokit HTTP API.

Request bodies are plain JSON objects checked by
``todokit.application.validation``; only responses need models here.
Todos themselves are returned as ``todokit.application.TodoDto``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from todokit.application import TodoStats


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    code: str
    message: str
    errors: Optional[dict[str, list[str]]] = None


class TodoStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    active: int
    completed: int
    overdue: int
    high_priority: int = Field(alias="highPriority")
    completion_percent: float = Field(alias="completionPercent")

    @classmethod
    def from_stats(cls, stats: TodoStats) -> "TodoStatsResponse":
        return cls(
            total=stats.total,
            active=stats.active,
            completed=stats.completed,
            overdue=stats.overdue,
            high_priority=stats.high_priority,
            completion_percent=stats.completion_percent,
        )
