"""
Action types for the console invocation core.

This module defines the data structures shared by the core components:
- ParamType: Closed set of parameter types the binder can coerce
- ParamDef: One entry of an action's parameter signature
- ValidationStatus: Outcome of signature validation
- Preformatted: One titled block of an invocation result

Per project patterns:
- Use str enum for JSON serialization compatibility
- Pydantic BaseModel for validation and serialization
- Field() with descriptions for documentation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ParamType(str, Enum):
    """
    Parameter types supported by the binder.

    Values match the Python builtin names so annotations can be
    mapped with ``ParamType(annotation.__name__)``.
    """

    STR = "str"
    """Passed through verbatim."""

    INT = "int"
    """Numeric prefix parsed as integer."""

    FLOAT = "float"
    """Numeric prefix parsed as float."""

    BOOL = "bool"
    """Empty string and "0" are false, anything else is true."""


class ParamDef(BaseModel):
    """
    Parameter definition derived from a callable's signature.

    Attributes:
        name: Parameter name as declared
        type: Supported type, None when missing or unsupported
        annotation: Display name of the declared annotation (None if absent)
        has_default: Whether the parameter declares a default value
        default: The declared default (None if not declared)
        keyword_only: Whether the parameter must be passed by name
    """

    name: str = Field(..., description="Parameter name as declared")
    type: ParamType | None = Field(
        default=None, description="Supported type, None when missing or unsupported"
    )
    annotation: str | None = Field(
        default=None, description="Display name of the declared annotation"
    )
    has_default: bool = Field(
        default=False, description="Whether a default value is declared"
    )
    default: Any = Field(default=None, description="Declared default value")
    keyword_only: bool = Field(
        default=False, description="Whether the parameter must be passed by name"
    )

    class Config:
        """Pydantic configuration."""

        use_enum_values = False  # Keep enum instances for exhaustive matching


@dataclass(frozen=True)
class ValidationStatus:
    """Result of action signature validation.

    Attributes:
        is_valid: Whether every parameter is binder-supportable
        message: "OK" when valid, the reason otherwise
    """

    is_valid: bool
    message: str

    @classmethod
    def valid(cls) -> "ValidationStatus":
        return cls(is_valid=True, message="OK")

    @classmethod
    def invalid(cls, message: str) -> "ValidationStatus":
        return cls(is_valid=False, message=message)

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid


class Preformatted(BaseModel):
    """
    One titled block of text produced by an invocation.

    The language is a highlight.js class name used by the web console.

    Attributes:
        title: Block title ("Value", "Output", "Throwable", ...)
        body: Preformatted text
        language: Highlighting language ("plaintext" or "python")
    """

    title: str = Field(..., description="Block title")
    body: str = Field(..., description="Preformatted text")
    language: str = Field(default="plaintext", description="Highlighting language")


def with_status(entries: list[Preformatted]) -> list[Preformatted]:
    """Return entries, or a single ``Status: Done`` entry when empty."""
    if entries:
        return entries
    return [Preformatted(title="Status", body="Done")]
