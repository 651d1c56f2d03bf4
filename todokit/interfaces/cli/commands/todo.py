"""Todo CLI commands.

Commands for the todo lifecycle: adding, listing, updating, toggling,
completing and deleting todos, plus summary statistics.
"""

from datetime import datetime
from typing import Any, Optional

import typer

from todokit.interfaces.cli.common import (
    DataFileOption,
    format_todo_details,
    format_todo_line,
    get_services,
    handle_domain_errors,
    print_error,
    print_info,
    print_separator,
    print_success,
)

app = typer.Typer(help="Todo management commands")


@app.command("add")
def add(
    title: str = typer.Argument(..., help="Todo title"),
    priority: Optional[str] = typer.Option(None, "--priority", "-P", help="low, medium or high"),
    due: Optional[str] = typer.Option(None, "--due", help="Due date (ISO-8601)"),
    data_file: DataFileOption = None,
) -> None:
    """Create a new todo."""
    commands, _ = get_services(data_file)
    payload: dict[str, Any] = {"title": title}
    if priority is not None:
        payload["priority"] = priority
    if due is not None:
        payload["dueDate"] = due

    with handle_domain_errors():
        todo = commands.create_todo(payload)
    print_success(f"Created: {format_todo_line(todo)}")


@app.command("list")
def list_todos(
    filter: str = typer.Option("all", "--filter", "-f", help="all, active or completed"),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", "-s", help="priority, createdAt or urgency"),
    order: str = typer.Option("asc", "--order", "-o", help="asc or desc"),
    data_file: DataFileOption = None,
) -> None:
    """List todos."""
    _, queries = get_services(data_file)
    with handle_domain_errors():
        todos = queries.get_filtered(filter=filter, sort_by=sort_by, sort_order=order)

    if not todos:
        print_info("No todos found.")
        return
    for todo in todos:
        typer.echo(format_todo_line(todo))


@app.command("show")
def show(
    todo_id: str = typer.Argument(..., help="Todo ID"),
    data_file: DataFileOption = None,
) -> None:
    """Show one todo in detail."""
    _, queries = get_services(data_file)
    with handle_domain_errors():
        todo = queries.get_by_id(todo_id)
    if todo is None:
        print_error(f"Todo with ID {todo_id} not found")
        raise typer.Exit(1)
    typer.echo(format_todo_details(todo))


@app.command("update")
def update(
    todo_id: str = typer.Argument(..., help="Todo ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    priority: Optional[str] = typer.Option(None, "--priority", "-P", help="low, medium or high"),
    due: Optional[str] = typer.Option(None, "--due", help="New due date (ISO-8601)"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    completed: Optional[bool] = typer.Option(
        None, "--completed/--active", help="Set completion state"
    ),
    data_file: DataFileOption = None,
) -> None:
    """Update selected fields of a todo."""
    commands, _ = get_services(data_file)
    payload: dict[str, Any] = {}
    if title is not None:
        payload["title"] = title
    if priority is not None:
        payload["priority"] = priority
    if completed is not None:
        payload["completed"] = completed
    if clear_due:
        payload["dueDate"] = None
    elif due is not None:
        payload["dueDate"] = due

    with handle_domain_errors():
        todo = commands.update_todo(todo_id, payload)
    print_success(f"Updated: {format_todo_line(todo)}")


@app.command("toggle")
def toggle(
    todo_id: str = typer.Argument(..., help="Todo ID"),
    data_file: DataFileOption = None,
) -> None:
    """Flip a todo between active and completed."""
    commands, _ = get_services(data_file)
    with handle_domain_errors():
        todo = commands.toggle_todo(todo_id)
    print_success(format_todo_line(todo))


@app.command("done")
def done(
    todo_id: str = typer.Argument(..., help="Todo ID"),
    data_file: DataFileOption = None,
) -> None:
    """Mark a todo completed. Fails if it already is."""
    commands, _ = get_services(data_file)
    with handle_domain_errors():
        todo = commands.complete_todo(todo_id)
    print_success(f"Completed: {todo.title_value}")


@app.command("delete")
def delete(
    todo_id: str = typer.Argument(..., help="Todo ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    data_file: DataFileOption = None,
) -> None:
    """Delete a todo."""
    if not yes:
        typer.confirm(f"Delete todo {todo_id}?", abort=True)

    commands, _ = get_services(data_file)
    with handle_domain_errors():
        commands.delete_todo(todo_id)
    print_success(f"Deleted {todo_id}")


@app.command("stats")
def stats(data_file: DataFileOption = None) -> None:
    """Show todo counts."""
    _, queries = get_services(data_file)
    with handle_domain_errors():
        result = queries.get_stats()

    print_separator()
    typer.echo(f"Todos as of {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print_separator()
    typer.echo(f"Total:         {result.total}")
    typer.echo(f"Active:        {result.active}")
    typer.echo(f"Completed:     {result.completed} ({result.completion_percent}%)")
    typer.echo(f"Overdue:       {result.overdue}")
    typer.echo(f"High priority: {result.high_priority}")
