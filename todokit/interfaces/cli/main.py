"""Entry point for the todokit CLI.

Usage:
    python -m todokit.interfaces.cli.main

Or via installed entry point:
    todokit <command>
"""

from todokit.interfaces.cli import app


def main() -> None:
    """Run the todokit CLI application."""
    app()


if __name__ == "__main__":
    main()
