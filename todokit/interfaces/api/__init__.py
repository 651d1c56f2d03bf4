"""HTTP API for todokit (FastAPI)."""

from todokit.interfaces.api.routes import create_app, router

__all__ = ["router", "create_app"]
