"""Todo domain - the core of todokit.

Pure domain layer: no I/O, no logging, no framework imports.

Key Types:
    Todo - Immutable aggregate
    TodoTitle, TodoPriority, TodoId - Self-validating value objects
    PriorityLevel - Allowed priority levels
    IdFormat - Registrable identifier format
    TodoRepository - Persistence port consumed by use cases
    TodoChanges - Partial update payload

Specifications:
    ActiveTodoSpecification, CompletedTodoSpecification,
    OverdueTodoSpecification, HighPriorityTodoSpecification,
    PriorityTodoSpecification, DueBeforeSpecification,
    TitleContainsSpecification

Errors:
    DomainError and its subclasses (see exceptions module)
"""

from .exceptions import (
    DomainError,
    InvalidStateError,
    InvalidTodoIdError,
    InvalidTodoPriorityError,
    InvalidTodoTitleError,
    RepositoryError,
    TodoAlreadyCompletedError,
    TodoInvariantError,
    TodoNotFoundError,
    TodoValidationError,
)
from .models import OVERDUE_AFTER, Todo, ensure_utc, utc_now
from .repository import TodoChanges, TodoRepository
from .service import calculate_urgency_score, sort_by_urgency
from .specifications import (
    ActiveTodoSpecification,
    CompletedTodoSpecification,
    DueBeforeSpecification,
    HighPriorityTodoSpecification,
    OverdueTodoSpecification,
    PriorityTodoSpecification,
    TitleContainsSpecification,
)
from .value_objects import (
    MONGO_OBJECT_ID_FORMAT,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    UUID_FORMAT,
    IdFormat,
    PriorityLevel,
    TodoId,
    TodoPriority,
    TodoTitle,
    generate_todo_id,
)

__all__ = [
    # Models
    "Todo",
    "OVERDUE_AFTER",
    "utc_now",
    "ensure_utc",
    # Value objects
    "TodoTitle",
    "TodoPriority",
    "PriorityLevel",
    "TodoId",
    "IdFormat",
    "UUID_FORMAT",
    "MONGO_OBJECT_ID_FORMAT",
    "TITLE_MIN_LENGTH",
    "TITLE_MAX_LENGTH",
    "generate_todo_id",
    # Repository
    "TodoRepository",
    "TodoChanges",
    # Domain service
    "calculate_urgency_score",
    "sort_by_urgency",
    # Specifications
    "ActiveTodoSpecification",
    "CompletedTodoSpecification",
    "OverdueTodoSpecification",
    "HighPriorityTodoSpecification",
    "PriorityTodoSpecification",
    "DueBeforeSpecification",
    "TitleContainsSpecification",
    # Errors
    "DomainError",
    "TodoNotFoundError",
    "InvalidStateError",
    "TodoAlreadyCompletedError",
    "TodoValidationError",
    "InvalidTodoTitleError",
    "InvalidTodoPriorityError",
    "InvalidTodoIdError",
    "TodoInvariantError",
    "RepositoryError",
]
