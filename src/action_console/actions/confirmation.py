"""
Confirmation codes for risky actions.

A risky action only runs from the web console when the operator types
the short code displayed next to it. Codes come from ``random``.

Codes are generated lazily, once per action name, and stay valid for the
lifetime of the process. Each worker process has its own codes.

Example:
    ```python
    gate = ConfirmationGate()
    code = gate.code_for(action)          # e.g. "qzke", stable per process
    gate.is_confirmed(action, code)       # True
    gate.is_confirmed(action, "QZKE")     # False
    ```
"""

import logging
import random
import string

from action_console.actions.action import Action

logger = logging.getLogger(__name__)


class ConfirmationGate:
    """
    Generates and checks per-action confirmation codes.

    Attributes:
        CODE_LENGTH: Number of characters in a code
        ALPHABET: Characters a code is drawn from
    """

    CODE_LENGTH = 4
    ALPHABET = string.ascii_lowercase

    def __init__(self, rng: random.Random | None = None) -> None:
        """
        Initialize the gate with an empty code cache.

        Args:
            rng: Random source (defaults to a fresh, OS-seeded generator)
        """
        self._rng = rng or random.Random()
        self._codes: dict[str, str] = {}

    def _generate_code(self) -> str:
        return "".join(
            self._rng.choice(self.ALPHABET) for _ in range(self.CODE_LENGTH)
        )

    def code_for(self, action: Action) -> str:
        """
        Return the confirmation code for an action, generating it once.

        Args:
            action: A named action

        Returns:
            The memoized lowercase code
        """
        code = self._codes.get(action.name)
        if code is None:
            code = self._generate_code()
            self._codes[action.name] = code
            logger.debug(f"Generated confirmation code for '{action.name}'")
        return code

    def is_confirmed(self, action: Action, submitted: str | None) -> bool:
        """
        Check a submitted confirmation code.

        Non-risky actions are always confirmed. Otherwise the submitted
        code must match exactly (case-sensitive).

        Args:
            action: The action about to run
            submitted: The code typed by the operator (None if absent)

        Returns:
            True if the action may run
        """
        if not action.risky:
            return True

        confirmed = submitted == self.code_for(action)
        if not confirmed:
            logger.info(f"Confirmation code mismatch for '{action.name}'")
        return confirmed
