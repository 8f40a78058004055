"""
Parameter binding from untyped console input.

Terminals and HTML forms only ever deliver strings. The binder turns
those strings into an argument list for an action, one value per
parameter in signature order, using the declared ParamType:

- bool: "" and "0" are False, any other string is True
- int / float: the numeric prefix of the string, 0 when there is none
- str (and undeclared types): passed through verbatim

An empty value first falls back to the parameter's declared default.
Without a default the web console uses the type's zero value, while the
CLI asks again.

Example:
    ```python
    binder = ParameterBinder()
    binder.bind(action, {"n": "", "ratio": "3.5abc"})  # [7, 3.5] when n defaults to 7
    ```
"""

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from action_console.actions.action import Action
from action_console.actions.types import ParamDef, ParamType

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Strings the bool coercion treats as false
FALSE_STRINGS = ("", "0")


def _parse_int(raw: str) -> int:
    match = _INT_PREFIX.match(raw.strip())
    return int(match.group()) if match else 0


def _parse_float(raw: str) -> float:
    match = _FLOAT_PREFIX.match(raw.strip())
    return float(match.group()) if match else 0.0


def coerce(param_type: ParamType | None, raw: str) -> Any:
    """
    Coerce a raw string to the given parameter type.

    Args:
        param_type: Declared type, None for undeclared/unsupported
        raw: The raw string

    Returns:
        The coerced value
    """
    if param_type is ParamType.BOOL:
        return raw not in FALSE_STRINGS
    elif param_type is ParamType.INT:
        return _parse_int(raw)
    elif param_type is ParamType.FLOAT:
        return _parse_float(raw)
    elif param_type is ParamType.STR or param_type is None:
        return raw
    raise ValueError(f"Unhandled parameter type: {param_type}")


class ParameterBinder:
    """Binds raw string input to an action's parameter signature."""

    def resolve_value(self, param: ParamDef, raw: str | None) -> Any:
        """
        Resolve one parameter for form input.

        Args:
            param: The parameter definition
            raw: Submitted value, None when the field was absent

        Returns:
            The default for empty input when declared, the coerced value
            otherwise (the type's zero value for empty input)
        """
        if not raw:
            if param.has_default:
                return param.default
            raw = ""
        return coerce(param.type, raw)

    def bind(self, action: Action, values: Mapping[str, str | None]) -> list[Any]:
        """
        Bind submitted values keyed by parameter name.

        Args:
            action: The action whose signature drives coercion
            values: Raw values keyed by parameter name

        Returns:
            One argument per parameter, in signature order
        """
        return [
            self.resolve_value(param, values.get(param.name))
            for param in action.parameters
        ]

    def bind_interactive(
        self,
        action: Action,
        prompt: Callable[[str], str],
    ) -> list[Any]:
        """
        Bind values asked one parameter at a time.

        Each parameter is prompted by name until a non-empty answer is
        given, unless it declares a default, which then answers for an
        empty input.

        Args:
            action: The action whose signature drives coercion
            prompt: Called with the parameter name, returns the raw answer

        Returns:
            One argument per parameter, in signature order
        """
        arguments: list[Any] = []

        for param in action.parameters:
            while True:
                raw = prompt(param.name).strip()
                if raw:
                    arguments.append(coerce(param.type, raw))
                    break
                if param.has_default:
                    arguments.append(param.default)
                    break
                logger.debug(f"Empty value for required parameter '{param.name}'")

        return arguments
