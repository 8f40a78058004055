"""
Action Console

Register plain Python callables and run them from a terminal prompt or a
web console. This package provides:

- Actions: registry, loader, parameter binder, validator, confirmation gate
  and the capturing execution engine (ActionManager.handle)
- CLI infrastructure: Typer-based run/list/serve commands
- Web console: FastAPI application with Jinja2 templates
- Settings: environment-based configuration
"""

__version__ = "0.1.0"

# Re-export public types for convenient imports
from action_console.actions import (
    Action,
    ActionManager,
    ActionRegistry,
    Preformatted,
)

__all__ = [
    "__version__",
    "Action",
    "ActionManager",
    "ActionRegistry",
    "Preformatted",
]
