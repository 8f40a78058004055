"""Environment-based configuration for the action console."""

import secrets

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Action console configuration.

    All settings can be overridden via environment variables with
    ACTION_CONSOLE_ prefix. For example:
        ACTION_CONSOLE_ACTIONS=myproject.console:actions
        ACTION_CONSOLE_PORT=9000
    """

    # Action definition target ("package.module:attribute")
    actions: str | None = None

    # Web server
    host: str = "127.0.0.1"
    port: int = 8000

    # Signs the session cookie carrying the results token across the redirect.
    # A random default means sessions do not survive restarts.
    session_secret: str = Field(default_factory=lambda: secrets.token_hex(32))

    # Cookie toggled by the console's dark mode button
    dark_mode_cookie: str = "dark-mode"

    # Undisplayed result lists kept in memory before the oldest is dropped
    max_pending_results: int = 256

    log_level: str = "WARNING"

    model_config = {"env_prefix": "ACTION_CONSOLE_"}


settings = Settings()
