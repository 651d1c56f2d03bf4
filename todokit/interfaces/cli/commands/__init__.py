"""CLI command groups for todokit."""

from todokit.interfaces.cli.commands import todo

__all__ = ["todo"]
