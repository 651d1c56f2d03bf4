"""Typed errors raised by the todo domain and its use cases.

Every error carries a stable ``code`` and a suggested ``status_code`` so a
transport layer can translate it without inspecting messages. The hierarchy
groups errors by kind so callers can catch a whole branch:

    DomainError
    ├── TodoNotFoundError
    ├── InvalidStateError
    │   └── TodoAlreadyCompletedError
    ├── TodoValidationError
    │   ├── InvalidTodoTitleError
    │   ├── InvalidTodoPriorityError
    │   ├── InvalidTodoIdError
    │   └── TodoInvariantError
    └── RepositoryError
"""

from typing import Any


class DomainError(Exception):
    """Base class for all todokit errors."""

    code = "DOMAIN_ERROR"
    status_code = 400

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Return a transport-friendly representation."""
        return {"code": self.code, "message": self.message}


class TodoNotFoundError(DomainError):
    """No todo exists for the referenced id."""

    code = "TODO_NOT_FOUND"
    status_code = 404

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo with ID {todo_id} not found")
        self.todo_id = todo_id


class InvalidStateError(DomainError):
    """An operation is not allowed in the todo's current state."""

    code = "INVALID_STATE"
    status_code = 409


class TodoAlreadyCompletedError(InvalidStateError):
    code = "TODO_ALREADY_COMPLETED"

    def __init__(self) -> None:
        super().__init__("Todo is already completed")


class TodoValidationError(DomainError):
    """A value or invariant check failed."""

    code = "TODO_VALIDATION_ERROR"
    status_code = 400


class InvalidTodoTitleError(TodoValidationError):
    code = "INVALID_TODO_TITLE"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid todo title: {reason}")
        self.reason = reason


class InvalidTodoPriorityError(TodoValidationError):
    code = "INVALID_TODO_PRIORITY"

    def __init__(self, priority: object) -> None:
        super().__init__(f"Invalid todo priority: {priority}")
        self.priority = priority


class InvalidTodoIdError(TodoValidationError):
    code = "INVALID_TODO_ID"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid todo ID: {reason}")
        self.reason = reason


class TodoInvariantError(TodoValidationError):
    """Raised by ``Todo.validate()`` when a business invariant is broken."""

    code = "TODO_INVARIANT_VIOLATION"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class RepositoryError(DomainError):
    """A storage adapter failed (I/O, corrupt data, connectivity).

    The core never raises this itself; adapters do, and use cases let it
    propagate unchanged.
    """

    code = "REPOSITORY_ERROR"
    status_code = 500
