"""
Action wrapper and parameter signature derivation.

An Action owns one callable plus the metadata the console needs to offer
it: a name, the anonymous/risky/value-only flags and the parameter
signature. The signature is derived once, at construction, from
``inspect.signature``, string annotations being evaluated one parameter
at a time, so the binder and the validator never inspect the callable
again.

Example:
    ```python
    def greet(name: str, times: int = 1) -> str:
        return " ".join([f"hello {name}"] * times)

    action = Action(greet, name="greet")
    [p.type for p in action.parameters]  # [ParamType.STR, ParamType.INT]
    action.invoke(["world", 2])          # "hello world hello world"
    ```
"""

import functools
import inspect
import logging
import types
import typing
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from action_console.actions.types import ParamDef, ParamType

logger = logging.getLogger(__name__)

_SUPPORTED_TYPES: dict[Any, ParamType] = {
    str: ParamType.STR,
    int: ParamType.INT,
    float: ParamType.FLOAT,
    bool: ParamType.BOOL,
}

# *args and **kwargs take no value from the console
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _source_target(func: Callable[..., Any]) -> Any:
    """Return the object whose source and hints describe ``func``."""
    target = inspect.unwrap(func)
    if isinstance(target, functools.partial):
        target = target.func
    if inspect.isfunction(target) or inspect.ismethod(target) or inspect.isclass(target):
        return target
    # Callable instance: describe its class
    return type(target)


def _annotation_namespace(func: Callable[..., Any]) -> dict[str, Any]:
    """Return the globals string annotations of ``func`` are evaluated in."""
    target = inspect.unwrap(func)
    if isinstance(target, functools.partial):
        target = target.func
    if inspect.isclass(target):
        target = target.__init__
    elif not (inspect.isfunction(target) or inspect.ismethod(target)):
        target = type(target).__call__
    return getattr(inspect.unwrap(target), "__globals__", {})


def _resolve_annotation(annotation: Any, namespace: dict[str, Any]) -> Any:
    """
    Evaluate one string annotation (``from __future__ import annotations``).

    Each parameter is resolved on its own, so a name that only exists
    under ``TYPE_CHECKING`` affects that parameter alone. An unresolvable
    annotation is kept as its string.
    """
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, dict(namespace))
    except Exception as e:
        logger.debug(f"Could not resolve annotation '{annotation}': {e}")
        return annotation


def _unwrap_optional(annotation: Any) -> Any:
    """Map ``Optional[T]`` and ``T | None`` to ``T``."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _annotation_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation)


def build_signature(func: Callable[..., Any]) -> list[ParamDef]:
    """
    Derive the parameter signature of a callable.

    Parameters without an annotation, or annotated with anything other
    than str/int/float/bool (optionally wrapped in Optional), get
    ``type=None``; the validator reports them.

    Args:
        func: The callable to describe

    Returns:
        ParamDef list in declaration order, without *args/**kwargs
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        # Some builtins expose no signature
        logger.debug(f"No signature available for {func!r}: {e}")
        return []

    namespace = _annotation_namespace(func)
    parameters: list[ParamDef] = []

    for param in signature.parameters.values():
        if param.kind in _SKIPPED_KINDS:
            continue

        annotation = _resolve_annotation(param.annotation, namespace)
        has_default = param.default is not inspect.Parameter.empty

        if annotation is inspect.Parameter.empty:
            param_type = None
            annotation_name = None
        else:
            annotation_name = _annotation_name(annotation)
            param_type = _SUPPORTED_TYPES.get(_unwrap_optional(annotation))

        parameters.append(
            ParamDef(
                name=param.name,
                type=param_type,
                annotation=annotation_name,
                has_default=has_default,
                default=param.default if has_default else None,
                keyword_only=param.kind == inspect.Parameter.KEYWORD_ONLY,
            )
        )

    return parameters


class Action:
    """
    Named, invocable unit wrapping a callable and its classification flags.

    Attributes:
        func: The wrapped callable
        parameters: Parameter signature derived at construction
        name: Unique name (None until assigned; immutable once set)
        risky: Whether execution requires a confirmation code
        anonymous: True until a name is given explicitly or from a key
        just_value: True when the action wraps a plain value
    """

    def __init__(
        self,
        func: Callable[..., Any],
        risky: bool = True,
        name: str | None = None,
    ) -> None:
        """
        Initialize the action.

        Args:
            func: The callable to wrap
            risky: Whether a confirmation code is required (default True)
            name: Explicit name; an explicitly named action is not anonymous
        """
        if not callable(func):
            raise TypeError(f"Action requires a callable, got {type(func).__name__}")

        self._func = func
        self._parameters = build_signature(func)
        self._risky = risky
        self._just_value = False
        self._anonymous = name is None
        self._name = name
        self._name_synthesized = False

    def __repr__(self) -> str:
        return (
            f"Action(name={self._name!r}, risky={self._risky}, "
            f"anonymous={self._anonymous}, just_value={self._just_value})"
        )

    @property
    def func(self) -> Callable[..., Any]:
        return self._func

    @property
    def parameters(self) -> list[ParamDef]:
        return list(self._parameters)

    @property
    def has_name(self) -> bool:
        return self._name is not None

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if self._name is not None and self._name != name:
            raise ValueError(
                f"Action '{self._name}' is already named; cannot rename to '{name}'"
            )
        self._name = name

    @property
    def name_synthesized(self) -> bool:
        """Whether the name was generated by the loader (``anonymous-<key>``)."""
        return self._name_synthesized

    def synthesize_name(self, name: str) -> None:
        """Assign a generated name; the action stays anonymous."""
        self.name = name
        self._name_synthesized = True

    @property
    def risky(self) -> bool:
        return self._risky

    @property
    def anonymous(self) -> bool:
        return self._anonymous

    @anonymous.setter
    def anonymous(self, anonymous: bool) -> None:
        self._anonymous = anonymous

    @property
    def just_value(self) -> bool:
        return self._just_value

    @just_value.setter
    def just_value(self, just_value: bool) -> None:
        self._just_value = just_value

    @property
    def location(self) -> str:
        """Source location as ``path:line``, relative to the working directory."""
        target = _source_target(self._func)
        try:
            filename = inspect.getsourcefile(target) or inspect.getfile(target)
            _, line = inspect.getsourcelines(target)
        except (TypeError, OSError):
            return "<unknown>"

        path = Path(filename).resolve()
        try:
            path = path.relative_to(Path.cwd())
        except ValueError:
            pass  # Outside the working directory: keep the absolute path
        return f"{path}:{line}"

    def invoke(self, arguments: Sequence[Any] = ()) -> Any:
        """
        Call the wrapped callable with arguments in signature order.

        Keyword-only parameters receive their value by name; arguments
        beyond the signature are passed positionally.

        Args:
            arguments: One value per parameter, in signature order

        Returns:
            Whatever the callable returns
        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}

        for param, value in zip(self._parameters, arguments):
            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)
        args.extend(arguments[len(self._parameters):])

        return self._func(*args, **kwargs)
