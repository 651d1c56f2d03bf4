"""Command use cases: operations that change todos.

Each use case takes a ``TodoRepository`` and exposes ``execute(command)``.
Read-modify-write use cases follow the same sequence: load the todo (raising
``TodoNotFoundError`` before any write when it is missing), transform it
through entity methods, ``validate()``, then persist.

There is no optimistic concurrency check; when two callers race on the same
id the later write wins.
"""

from todokit.domain.todo import (
    Todo,
    TodoChanges,
    TodoNotFoundError,
    TodoPriority,
    TodoRepository,
    TodoTitle,
    utc_now,
)

from ..dto import (
    CompleteTodoCommand,
    CreateTodoCommand,
    DeleteTodoCommand,
    ToggleTodoCommand,
    UpdateTodoCommand,
)


def _load_existing(repository: TodoRepository, todo_id: str) -> Todo:
    todo = repository.get_by_id(todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return todo


class CreateTodoUseCase:
    """Create a new, incomplete todo and persist it."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, command: CreateTodoCommand) -> Todo:
        """Create the todo.

        Returns:
            The new todo carrying the id assigned by the repository.

        Raises:
            InvalidTodoTitleError: If the title fails validation.
            TodoInvariantError: If the due date precedes the creation time.
        """
        title = TodoTitle(command.title)
        todo = Todo(
            title=title,
            completed=False,
            created_at=utc_now(),
            priority=TodoPriority(command.priority or TodoPriority().level),
            due_date=command.due_date,
        )
        todo.validate()

        todo_id = self._repository.create(todo)
        return todo.with_id(todo_id)


class UpdateTodoUseCase:
    """Apply a partial update to an existing todo."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateTodoCommand) -> Todo:
        """Update only the fields present in the command.

        Setting ``completed=True`` on an active todo goes through
        ``Todo.complete()``; setting it to False on a completed todo goes
        through ``Todo.toggle()``. A value equal to the current one is a
        no-op for that field.

        Returns:
            The updated todo.

        Raises:
            TodoNotFoundError: If the id is unknown. Nothing is written.
        """
        existing = _load_existing(self._repository, command.id)

        updated = existing
        if command.title is not None:
            updated = updated.update_title(command.title)

        if command.priority is not None:
            updated = updated.update_priority(command.priority)

        if command.completed is not None:
            if command.completed and not updated.completed:
                updated = updated.complete()
            elif not command.completed and updated.completed:
                updated = updated.toggle()

        if command.clear_due_date:
            updated = updated.update_due_date(None)
        elif command.due_date is not None:
            updated = updated.update_due_date(command.due_date)

        updated.validate()

        # Only fields named in the command are written back
        self._repository.update(
            command.id,
            TodoChanges(
                title=updated.title if command.title is not None else None,
                completed=updated.completed if command.completed is not None else None,
                priority=updated.priority if command.priority is not None else None,
                due_date=updated.due_date if command.due_date is not None else None,
                clear_due_date=command.clear_due_date,
            ),
        )
        return updated


class DeleteTodoUseCase:
    """Delete a todo after confirming it exists."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, command: DeleteTodoCommand) -> None:
        """Delete the todo.

        Raises:
            TodoNotFoundError: If the id is unknown. Nothing is deleted.
        """
        _load_existing(self._repository, command.id)
        self._repository.delete(command.id)


class ToggleTodoUseCase:
    """Flip a todo's completion flag.

    Persists the ``completed`` field directly instead of routing through
    ``UpdateTodoUseCase``.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, command: ToggleTodoCommand) -> Todo:
        existing = _load_existing(self._repository, command.id)

        toggled = existing.toggle()
        toggled.validate()

        self._repository.update(command.id, TodoChanges(completed=toggled.completed))
        return toggled


class CompleteTodoUseCase:
    """Mark a todo completed, failing if it already is.

    Raises:
        TodoNotFoundError: If the id is unknown.
        TodoAlreadyCompletedError: If the todo is already completed.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, command: CompleteTodoCommand) -> Todo:
        existing = _load_existing(self._repository, command.id)

        completed = existing.complete()
        completed.validate()

        self._repository.update(command.id, TodoChanges(completed=True))
        return completed
