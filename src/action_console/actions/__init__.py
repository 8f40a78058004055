"""
Actions module for the console invocation core.

This module provides the components shared by the CLI and web console:
- Action: Callable wrapper with name, flags and parameter signature
- ActionRegistry: Name-based action lookup
- load_actions: Normalize and register an action definition
- ParameterBinder: Raw string input to typed arguments
- ActionValidator: Binder-supportability check for signatures
- ConfirmationGate: Per-process confirmation codes for risky actions
- FlagClassifier: Display flags for actions
- ActionManager: Loading and capturing execution of actions

Exports:
    Action: Class wrapping one callable
    ActionLoadError: Exception for unresolvable action targets
    ActionManager: Coordinator with handle() execution engine
    ActionRegistry: Class for name-based lookup
    ActionValidator: Signature validator
    ConfirmationGate: Confirmation code generator and checker
    Flag: Dataclass for a display flag
    FlagClassifier: Flag derivation
    ParamDef: Pydantic model for one parameter
    ParamType: Enum of supported parameter types
    ParameterBinder: Input coercion
    Preformatted: Pydantic model for one result entry
    ValidationStatus: Dataclass for validation outcomes
    build_signature: Signature derivation function
    coerce: Single-value coercion function
    load_actions: Definition loading function
    load_target: Import target resolution function
    with_status: Empty-result substitution helper
"""

from action_console.actions.action import Action, build_signature
from action_console.actions.binding import ParameterBinder, coerce
from action_console.actions.confirmation import ConfirmationGate
from action_console.actions.flags import Flag, FlagClassifier
from action_console.actions.loader import ActionLoadError, load_actions, load_target
from action_console.actions.manager import ActionManager
from action_console.actions.registry import ActionRegistry
from action_console.actions.types import (
    ParamDef,
    ParamType,
    Preformatted,
    ValidationStatus,
    with_status,
)
from action_console.actions.validation import ActionValidator

__all__ = [
    "Action",
    "ActionLoadError",
    "ActionManager",
    "ActionRegistry",
    "ActionValidator",
    "ConfirmationGate",
    "Flag",
    "FlagClassifier",
    "ParamDef",
    "ParamType",
    "ParameterBinder",
    "Preformatted",
    "ValidationStatus",
    "build_signature",
    "coerce",
    "load_actions",
    "load_target",
    "with_status",
]
