"""CLI interface for todokit using Typer.

Usage:
    todokit add "Buy milk" --priority high
    todokit list --filter active --sort-by priority --order desc
    todokit done <id>
    todokit stats

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (todo)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from todokit import __version__
from todokit.config import get_config
from todokit.interfaces.cli.commands import todo
from todokit.logging_setup import setup_logging

app = typer.Typer(
    name="todokit",
    help="Manage todos from the command line",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"todokit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log at DEBUG level"),
) -> None:
    """todokit - create, track and complete todos."""
    setup_logging("DEBUG" if verbose else get_config().log_level)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(todo.app, name="todo")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================

app.command("add", help="Create a new todo (shortcut for 'todo add').")(todo.add)
app.command("list", help="List todos (shortcut for 'todo list').")(todo.list_todos)
app.command("done", help="Mark a todo completed (shortcut for 'todo done').")(todo.done)
app.command("toggle", help="Toggle a todo (shortcut for 'todo toggle').")(todo.toggle)
app.command("stats", help="Show todo counts (shortcut for 'todo stats').")(todo.stats)
