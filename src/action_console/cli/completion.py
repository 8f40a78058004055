"""Prefix completion of action names for the interactive prompt."""

import contextlib
import sys
from collections.abc import Iterator

from action_console.actions.registry import ActionRegistry


def complete_names(registry: ActionRegistry, prefix: str) -> list[str]:
    """Return registered names starting with prefix, in registration order."""
    return [name for name in registry.list_action_names() if name.startswith(prefix)]


class ActionNameCompleter:
    """readline completer over the registry's action names."""

    def __init__(self, registry: ActionRegistry) -> None:
        self._registry = registry
        self._matches: list[str] = []

    def __call__(self, text: str, state: int) -> str | None:
        # readline calls with state 0, 1, 2... until None is returned
        if state == 0:
            self._matches = complete_names(self._registry, text)
        if state < len(self._matches):
            return self._matches[state]
        return None


@contextlib.contextmanager
def name_completion(registry: ActionRegistry) -> Iterator[None]:
    """
    Enable tab completion of action names while prompting.

    Completion only applies to interactive terminals on platforms with
    readline; elsewhere the prompt works without it.
    """
    if not sys.stdin.isatty():
        yield
        return

    try:
        import readline
    except ImportError:
        # No line editor (e.g. Windows without pyreadline)
        yield
        return

    previous_completer = readline.get_completer()
    previous_delims = readline.get_completer_delims()

    readline.set_completer(ActionNameCompleter(registry))
    # Names such as "anonymous-0" contain delimiters readline splits on
    readline.set_completer_delims(" \t\n")
    readline.parse_and_bind("tab: complete")
    try:
        yield
    finally:
        readline.set_completer(previous_completer)
        readline.set_completer_delims(previous_delims)
