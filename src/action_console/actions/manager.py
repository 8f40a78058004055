"""
Action manager: loading and execution of console actions.

This module provides ActionManager, the central coordinator used by both
front-ends:
- Load action definitions into the registry
- Execute an action with bound arguments and capture everything it does

Execution never raises. The return value, the text written to stdout
during the call and any exception are turned into Preformatted entries:

    Value      pprint rendering of a truthy return value
    Output     captured stdout, when not empty
    Throwable  formatted traceback, when the call failed

Example:
    ```python
    manager = ActionManager()
    manager.load({"hello": lambda: print("hi")})

    action = manager.registry.resolve("hello")
    manager.handle(action)  # [Preformatted(title="Output", body="hi\\n", ...)]
    ```
"""

import contextlib
import io
import logging
import pprint
import traceback
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from action_console.actions.action import Action
from action_console.actions.binding import ParameterBinder
from action_console.actions.confirmation import ConfirmationGate
from action_console.actions.flags import FlagClassifier
from action_console.actions.loader import ActionLoadError, load_actions, load_target
from action_console.actions.registry import ActionRegistry
from action_console.actions.types import Preformatted
from action_console.actions.validation import ActionValidator

logger = logging.getLogger(__name__)


class ActionManager:
    """
    Coordinator owning the registry and the invocation components.

    One manager normally lives for the whole process (see instance()),
    which also keeps confirmation codes stable for the process lifetime.

    Attributes:
        registry: Named actions
        validator: Signature validator for the web console
        binder: Raw input to argument coercion
        confirmation: Confirmation code gate for risky actions
        flags: Flag classifier for display
    """

    _instance: "ActionManager | None" = None

    def __init__(
        self,
        registry: ActionRegistry | None = None,
        validator: ActionValidator | None = None,
        binder: ParameterBinder | None = None,
        confirmation: ConfirmationGate | None = None,
    ) -> None:
        # An empty registry is falsy: test against None
        self.registry = registry if registry is not None else ActionRegistry()
        self.validator = validator or ActionValidator()
        self.binder = binder or ParameterBinder()
        self.confirmation = confirmation or ConfirmationGate()
        self.flags = FlagClassifier(self.validator)

    @classmethod
    def instance(cls) -> "ActionManager":
        """Return the process-wide manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def from_target(cls, target: str) -> "ActionManager":
        """
        Build a manager from a "package.module:attribute" target.

        The attribute may name an ActionManager, which is used as-is, or
        an action definition (mapping or list), which is loaded into a new
        manager.

        Args:
            target: Import target, attribute defaults to "actions"

        Returns:
            The manager

        Raises:
            ActionLoadError: If the target cannot be imported or loaded
        """
        obj = load_target(target)
        if isinstance(obj, ActionManager):
            return obj

        manager = cls()
        try:
            manager.load(obj)
        except TypeError as e:
            raise ActionLoadError(target, str(e)) from e
        return manager

    def load(self, actions: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> list[Action]:
        """Load an action definition into the registry (see load_actions)."""
        return load_actions(self.registry, actions)

    def action(
        self,
        func: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
        risky: bool = True,
    ) -> Any:
        """
        Decorator registering a function as an action.

        The action is named after the function unless a name is given.
        The function itself is returned unchanged.

        Example:
            ```python
            @manager.action
            def backup(target: str) -> None: ...

            @manager.action(name="stats", risky=False)
            def collect_stats() -> dict: ...
            ```
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.registry.register(Action(fn, risky=risky, name=name or fn.__name__))
            return fn

        if func is not None:
            return decorator(func)
        return decorator

    def handle(self, action: Action, arguments: Sequence[Any] = ()) -> list[Preformatted]:
        """
        Execute an action, capturing its value, stdout and failure.

        Args:
            action: The action to run
            arguments: One value per parameter, in signature order

        Returns:
            Zero to three Preformatted entries, in Value/Output/Throwable
            order. Front-ends substitute "Status: Done" for an empty list.
        """
        entries: list[Preformatted] = []
        failure: BaseException | None = None

        logger.info(f"Executing action '{action.name}'")

        with io.StringIO() as buffer:
            with contextlib.redirect_stdout(buffer):
                try:
                    value = action.invoke(arguments)
                    if value:
                        entries.append(
                            Preformatted(
                                title="Value",
                                body=pprint.pformat(value),
                                language="python",
                            )
                        )
                except (Exception, SystemExit) as e:
                    # sys.exit() inside an action is reported like any other failure
                    failure = e
            output = buffer.getvalue()

        if output:
            entries.append(Preformatted(title="Output", body=output))

        if failure is not None:
            logger.warning(
                f"Action '{action.name}' failed: {type(failure).__name__}: {failure}"
            )
            entries.append(
                Preformatted(
                    title="Throwable",
                    body="".join(
                        traceback.format_exception(
                            type(failure), failure, failure.__traceback__
                        )
                    ),
                    language="python",
                )
            )

        return entries
