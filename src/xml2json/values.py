"""Value types produced by the tree converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "@text"


@dataclass
class Scalar:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class RawExpression:
    """Text to be written out as-is, without JSON string quoting."""

    payload: str

    def __str__(self) -> str:
        return self.payload


@dataclass
class Object:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        inner = ", ".join(f"{k}: {v}" for k, v in self.entries.items())
        return "{" + inner + "}"


@dataclass
class Array:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


Value = Union[Scalar, RawExpression, Object, Array]


def has_text(value: Value) -> bool:
    """True for a raw expression or a non-empty scalar."""
    if isinstance(value, RawExpression):
        return True
    return isinstance(value, Scalar) and value.value != ""


def to_python(value: Value | dict[str, Value]) -> Any:
    """Convert a value tree to plain ``str`` / ``dict`` / ``list`` data.

    Raw expressions are kept as ``RawExpression`` instances so they stay
    distinguishable from ordinary strings.
    """
    if isinstance(value, dict):
        return {k: to_python(v) for k, v in value.items()}
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, RawExpression):
        return value
    if isinstance(value, Object):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, Array):
        return [to_python(v) for v in value.items]
    raise TypeError(f"Not a converted value: {value!r}")
