"""Typer-based command line interface."""

from action_console.cli.main import app, main

__all__ = ["app", "main"]
