"""
Action loading from heterogeneous definitions.

Users describe their console as a mapping (or a list) whose values are
pre-built Actions, plain callables or arbitrary values:

    ```python
    actions = {
        "backup": backup_database,           # callable -> risky action "backup"
        "version": "1.4.2",                  # value -> value-only action "version"
        "purge": Action(purge, risky=True),  # pre-built action
    }
    ```

Entries with an integer key (or list entries) get the synthesized name
``anonymous-<key>`` and stay anonymous.
"""

import functools
import importlib
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from action_console.actions.action import Action
from action_console.actions.registry import ActionRegistry

logger = logging.getLogger(__name__)

ANONYMOUS_PREFIX = "anonymous-"
DEFAULT_TARGET_ATTRIBUTE = "actions"


class ActionLoadError(ValueError):
    """
    Raised when an action definition target cannot be resolved.

    Attributes:
        target: The "module:attribute" target that failed
    """

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Cannot load actions from '{target}': {reason}")


def _constant(value: Any) -> Callable[[], Any]:
    def value_action() -> Any:
        return value

    return value_action


def to_action(value: Any) -> Action:
    """
    Normalize one definition value into an Action.

    Args:
        value: An Action, a callable or any other value

    Returns:
        The Action itself, a risky Action around the callable, or a
        non-risky value-only Action returning the value verbatim
    """
    if isinstance(value, Action):
        return value
    if callable(value):
        return Action(value, risky=True)

    action = Action(_constant(value), risky=False)
    action.just_value = True
    return action


def _entries(actions: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> Iterable[tuple[Any, Any]]:
    if isinstance(actions, Mapping):
        return actions.items()
    if isinstance(actions, (list, tuple)):
        return enumerate(actions)
    raise TypeError(
        f"Actions must be a mapping or a list, got {type(actions).__name__}"
    )


def load_actions(
    registry: ActionRegistry,
    actions: Mapping[Any, Any] | list[Any] | tuple[Any, ...],
) -> list[Action]:
    """
    Normalize, name and register every entry of an action definition.

    Naming rules:
    1. An action that already has a name keeps it, and is non-anonymous
       unless the name was synthesized by an earlier load
    2. A string key becomes the name and marks the action non-anonymous
    3. Any other key yields "anonymous-<key>" and the action stays anonymous

    Loading the same definition twice yields the same registry contents.

    Args:
        registry: Registry receiving the actions
        actions: Mapping of key -> value, or list of values

    Returns:
        The registered actions, in definition order

    Raises:
        TypeError: If actions is neither a mapping nor a list/tuple
    """
    loaded: list[Action] = []

    for key, value in _entries(actions):
        action = to_action(value)

        if action.has_name:
            # A name given by the user, explicitly or through an earlier load
            if not action.name_synthesized:
                action.anonymous = False
        elif isinstance(key, str):
            action.name = key
            action.anonymous = False
        else:
            action.synthesize_name(f"{ANONYMOUS_PREFIX}{key}")

        registry.register(action)
        loaded.append(action)

    logger.info(f"Loaded {len(loaded)} action(s)")
    return loaded


def load_target(target: str) -> Any:
    """
    Import the object named by a "package.module:attribute" target.

    The attribute defaults to ``actions`` and may be dotted.

    Args:
        target: Import target, e.g. "myproject.console:actions"

    Returns:
        The referenced object

    Raises:
        ActionLoadError: If the module or attribute cannot be found
    """
    module_name, _, attribute = target.partition(":")
    attribute = attribute or DEFAULT_TARGET_ATTRIBUTE

    if not module_name:
        raise ActionLoadError(target, "module name is empty")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ActionLoadError(target, f"cannot import module '{module_name}' ({e})") from e

    try:
        return functools.reduce(getattr, attribute.split("."), module)
    except AttributeError as e:
        raise ActionLoadError(
            target, f"module '{module_name}' has no attribute '{attribute}'"
        ) from e
