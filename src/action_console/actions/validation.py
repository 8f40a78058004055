"""
Signature validation for form-based invocation.

The web console can only offer an action when every parameter has a
type the binder knows how to coerce. ActionValidator checks this and
returns a ValidationStatus instead of raising, so front-ends can show
the message next to the action.

The CLI does not use the validator: untyped terminal input degrades to
string passthrough for unsupported parameters.

Example:
    ```python
    def fetch(url, retries: list[int]): ...

    ActionValidator().validate(Action(fetch)).message
    # "Parameter type declaration is missing: url"
    ```
"""

import logging

from action_console.actions.action import Action
from action_console.actions.types import ValidationStatus

logger = logging.getLogger(__name__)


class ActionValidator:
    """Checks that an action's parameters are all binder-supportable."""

    def validate(self, action: Action) -> ValidationStatus:
        """
        Validate an action's parameter signature. First failure wins.

        Args:
            action: The action to check

        Returns:
            ValidationStatus.valid() or an invalid status with the reason
        """
        for param in action.parameters:
            if param.annotation is None:
                return ValidationStatus.invalid(
                    f"Parameter type declaration is missing: {param.name}"
                )

            if param.type is None:
                logger.debug(
                    f"Action '{action.name}' has unsupported parameter type "
                    f"'{param.annotation}'"
                )
                return ValidationStatus.invalid(
                    f"Invalid parameter type: {param.annotation}"
                )

        return ValidationStatus.valid()
