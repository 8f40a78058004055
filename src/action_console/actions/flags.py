"""
Descriptive flags shown next to each action.

Flags are display hints only: an icon name (ionicons) and optional CSS
classes. They are derived from the action's classification and from
signature validation.
"""

from dataclasses import dataclass

from action_console.actions.action import Action
from action_console.actions.validation import ActionValidator


@dataclass(frozen=True)
class Flag:
    """A single flag.

    Attributes:
        key: Stable identifier ("anonymous", "just_value", "risky", "invalid")
        icon: Icon name
        classes: CSS classes for the icon
        label: Human-readable description
    """

    key: str
    icon: str
    classes: str = ""
    label: str = ""


ANONYMOUS = Flag("anonymous", "text", label="Anonymous")
JUST_VALUE = Flag("just_value", "shapes", "text-blue-500", label="Value only")
RISKY = Flag("risky", "warning", "text-yellow-500", label="Risky")
INVALID = Flag("invalid", "alert-circle", "text-red-500", label="Invalid signature")


class FlagClassifier:
    """Derives the flags of an action."""

    def __init__(self, validator: ActionValidator) -> None:
        self._validator = validator

    def resolve_all(self, action: Action) -> list[Flag]:
        """Return the action's flags in display order."""
        flags: list[Flag] = []

        if action.anonymous:
            flags.append(ANONYMOUS)
        if action.just_value:
            flags.append(JUST_VALUE)
        if action.risky:
            flags.append(RISKY)
        if self._validator.validate(action).is_invalid:
            flags.append(INVALID)

        return flags

    def has_any(self, action: Action) -> bool:
        return bool(self.resolve_all(action))
