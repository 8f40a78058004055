"""
Action registry for name-based action lookup.

The registry maps unique names to Actions. Insertion order defines the
listing order used by the CLI completion and the web console, and a
later registration under an existing name replaces the earlier one.

Example:
    ```python
    registry = ActionRegistry()
    registry.register(Action(backup, name="backup"))

    registry.resolve("backup")     # Action
    registry.resolve("missing")    # None
    registry.list_action_names()   # ["backup"]
    ```
"""

import logging

from action_console.actions.action import Action

logger = logging.getLogger(__name__)


class ActionRegistry:
    """
    Registry of named actions.

    Lookups never raise: unknown names resolve to None so front-ends can
    report them as user errors.
    """

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def register(self, action: Action) -> "ActionRegistry":
        """
        Register an action under its name (last write wins).

        Args:
            action: A named action

        Returns:
            The registry, for chaining

        Raises:
            ValueError: If the action has no name yet
        """
        if action.name is None:
            raise ValueError("Cannot register an action without a name")

        existing = self._actions.get(action.name)
        if existing is not None and existing is not action:
            # Replacement keeps the original listing position
            logger.warning(f"Overriding existing action '{action.name}'")

        self._actions[action.name] = action
        logger.debug(f"Registered action '{action.name}'")
        return self

    def resolve(self, name: str) -> Action | None:
        """
        Find an action by exact name.

        Args:
            name: The name to look up

        Returns:
            The Action if registered, None otherwise
        """
        return self._actions.get(name)

    def resolve_last(self) -> Action | None:
        """Return the last action in listing order, or None if empty."""
        if not self._actions:
            return None
        return next(reversed(self._actions.values()))

    def resolve_all(self) -> list[Action]:
        """Return all actions in registration order."""
        return list(self._actions.values())

    def list_action_names(self) -> list[str]:
        """Return all action names in registration order."""
        return list(self._actions.keys())
