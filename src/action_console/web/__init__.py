"""Web console: FastAPI application listing and running actions."""

from action_console.web.app import create_app

__all__ = ["create_app"]
