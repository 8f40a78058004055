"""
Request-scoped state for the web console.

Routes never touch the session or cookies directly. They build a
ConsoleContext from the request, which exposes:
- a SessionStore (get/set/pop) holding the token of pending results
- the process-wide ResultStore the results themselves are kept in
- the display-only ThemeState read from the dark mode cookie

The session is a signed cookie, which browsers cap at 4096 bytes, so
results (tracebacks, large values) never go into it.
"""

import logging
import secrets
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Protocol

from fastapi import Request

from action_console.actions.types import Preformatted

logger = logging.getLogger(__name__)

RESULTS_KEY = "results_token"


class SessionStore(Protocol):
    """Key-value store scoped to one browser session."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def pop(self, key: str) -> Any: ...


class MappingSessionStore:
    """SessionStore backed by a mutable mapping (e.g. ``request.session``)."""

    def __init__(self, data: MutableMapping[str, Any]) -> None:
        self._data = data

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def pop(self, key: str) -> Any:
        return self._data.pop(key, None)


class ResultStore:
    """
    Pending submission results, kept in process memory until displayed.

    Results whose redirect is never followed are evicted oldest first
    once more than ``max_pending`` are waiting.

    Attributes:
        max_pending: Maximum number of undisplayed result lists kept
    """

    def __init__(self, max_pending: int = 256) -> None:
        self.max_pending = max_pending
        self._pending: dict[str, list[Preformatted]] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def put(self, entries: list[Preformatted]) -> str:
        """Keep entries and return the token to retrieve them with."""
        token = secrets.token_urlsafe(16)
        self._pending[token] = list(entries)

        while len(self._pending) > self.max_pending:
            evicted = next(iter(self._pending))
            del self._pending[evicted]
            logger.debug(f"Evicted undisplayed results {evicted}")

        return token

    def pop(self, token: str | None) -> list[Preformatted]:
        """Remove and return the entries for a token (empty if unknown)."""
        if token is None:
            return []
        return self._pending.pop(token, [])


@dataclass(frozen=True)
class ThemeState:
    """Dark mode flag. Has no effect beyond rendering.

    Attributes:
        dark_mode: Whether the dark theme is active
    """

    dark_mode: bool = False

    @classmethod
    def from_cookie(cls, value: str | None) -> "ThemeState":
        # Same truthiness as the bool parameters: "" and "0" are false
        return cls(dark_mode=value not in (None, "", "0"))

    @property
    def icon(self) -> str:
        """Icon of the toggle button (switches to the other theme)."""
        return "sunny" if self.dark_mode else "moon"


@dataclass
class ConsoleContext:
    """Everything a console route needs from the request besides the form.

    Attributes:
        session: Session-scoped store
        results: Process-wide pending results
        theme: Display theme
    """

    session: SessionStore
    results: ResultStore
    theme: ThemeState

    @classmethod
    def from_request(cls, request: Request, dark_mode_cookie: str) -> "ConsoleContext":
        return cls(
            session=MappingSessionStore(request.session),
            results=request.app.state.results,
            theme=ThemeState.from_cookie(request.cookies.get(dark_mode_cookie)),
        )

    def store_results(self, entries: list[Preformatted]) -> None:
        # A newer submission replaces results that were never displayed
        self.results.pop(self.session.pop(RESULTS_KEY))
        self.session.set(RESULTS_KEY, self.results.put(entries))

    def pop_results(self) -> list[Preformatted]:
        """Consume the results stored by the last submission."""
        return self.results.pop(self.session.pop(RESULTS_KEY))
