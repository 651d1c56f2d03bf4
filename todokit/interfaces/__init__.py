"""Interfaces layer for todokit.

Adapters for external interactions:
- CLI: Command-line interface using Typer (todokit.interfaces.cli)
- API: REST API using FastAPI (todokit.interfaces.api)

The interfaces layer is responsible for:
- Accepting user input
- Calling application services
- Formatting output and translating errors for the user
"""
