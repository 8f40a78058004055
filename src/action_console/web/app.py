"""FastAPI application factory for the web console."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from action_console.actions.manager import ActionManager
from action_console.config import Settings, settings as default_settings
from action_console.web.context import ResultStore


def create_app(
    manager: ActionManager | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create the FastAPI application serving the console.

    Args:
        manager: Manager holding the actions. If None, the actions target
            from settings is loaded, falling back to the process-wide
            manager.
        settings: Configuration (defaults to environment settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings

    if manager is None:
        if settings.actions:
            manager = ActionManager.from_target(settings.actions)
        else:
            manager = ActionManager.instance()

    app = FastAPI(title="Action Console")

    # The signed cookie session only carries the token of pending results
    app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

    templates_dir = Path(__file__).parent / "templates"
    templates = Jinja2Templates(directory=str(templates_dir))

    # Store shared objects in app state for access in routes
    app.state.manager = manager
    app.state.settings = settings
    app.state.templates = templates
    app.state.results = ResultStore(max_pending=settings.max_pending_results)

    # Import and include routes
    from .routes import router
    app.include_router(router)

    return app
