"""Shared utilities for todokit CLI commands.

- Service construction from configuration
- Formatted output helpers (error, success, info)
- Todo formatting for display
- Domain error reporting
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

import typer

from todokit.application import CommandValidationError, TodoCommandService, TodoQueryService
from todokit.config import get_config
from todokit.domain.todo import DomainError, Todo
from todokit.infrastructure import build_repository

# Reusable data file option for CLI commands
# Usage: def my_command(data_file: DataFileOption = None) -> None:
DataFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--data-file",
        "-d",
        help="Todo store path (or set TODOKIT_DATA_FILE env var)",
        envvar="TODOKIT_DATA_FILE",
    ),
]


def get_services(data_file: Path | None = None) -> tuple[TodoCommandService, TodoQueryService]:
    """Build command and query services over the configured repository.

    Args:
        data_file: Explicit store path; overrides configuration.

    Returns:
        (command_service, query_service) sharing one repository.
    """
    config = get_config()
    if data_file is not None:
        config = config.model_copy(update={"data_file": data_file})

    repository = build_repository(config)
    return TodoCommandService(repository), TodoQueryService(repository)


def print_error(msg: str) -> None:
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def format_todo_line(todo: Todo) -> str:
    """One-line summary: checkbox, title, priority, due date, id.

    Example:
        [ ] Buy milk (high, due 2026-01-31) 3f2a...
    """
    checkbox = "[x]" if todo.completed else "[ ]"
    details = [todo.priority_level.value]
    if todo.due_date is not None:
        details.append(f"due {todo.due_date.date().isoformat()}")
    if todo.is_overdue():
        details.append("OVERDUE")
    return f"{checkbox} {todo.title_value} ({', '.join(details)}) {todo.string_id}"


def format_todo_details(todo: Todo) -> str:
    lines = [
        f"ID:        {todo.string_id}",
        f"Title:     {todo.title_value}",
        f"Status:    {'completed' if todo.completed else 'active'}",
        f"Priority:  {todo.priority_level.value}",
        f"Created:   {todo.created_at.isoformat()}",
        f"Due:       {todo.due_date.isoformat() if todo.due_date else '-'}",
        f"Overdue:   {'yes' if todo.is_overdue() else 'no'}",
    ]
    return "\n".join(lines)


@contextmanager
def handle_domain_errors() -> Iterator[None]:
    """Report todokit errors on stderr and exit with status 1."""
    try:
        yield
    except CommandValidationError as e:
        print_error(e.formatted_message())
        raise typer.Exit(1) from e
    except DomainError as e:
        print_error(e.message)
        raise typer.Exit(1) from e
    except ValueError as e:
        # Unknown filter/sort values from query construction
        print_error(str(e))
        raise typer.Exit(1) from e
