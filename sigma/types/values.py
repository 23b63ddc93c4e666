"""Runtime value tags and their printed representation."""

from __future__ import annotations

from enum import Enum

from sigma import RuntimeValue
from sigma.errors import SigmaInternalError
from sigma.types.nil import NilType


class ValueKind(Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    NIL = "nil"

    def __str__(self) -> str:
        return self.value


def kind_of(value: RuntimeValue) -> ValueKind:
    """Return the tag of a runtime value.

    bool is checked before float so that the two never overlap, even though
    Python would happily compare True == 1.0.
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, NilType):
        return ValueKind.NIL
    raise SigmaInternalError(f"unknown runtime value {value!r}")


def format_value(value: RuntimeValue) -> str:
    """Human-readable form used by print: %f for numbers, true/false, nil."""
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return f"{value:f}"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    return "nil"
