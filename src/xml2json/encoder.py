"""JSON text output for value trees."""

from __future__ import annotations

import json

from .values import Array, Object, RawExpression, Scalar, Value


def encode(value: Value | dict[str, Value], *, indent: int | None = None) -> str:
    """Serialize a value tree (or a root ``{tag: value}`` mapping) to JSON.

    Output is compact unless *indent* is given.  Raw expressions are
    written verbatim, which can make the result invalid as strict JSON.
    """
    if isinstance(value, dict):
        value = Object(value)
    return _encode(value, indent, 0)


def _encode(value: Value, indent: int | None, level: int) -> str:
    if isinstance(value, Scalar):
        return json.dumps(value.value)
    if isinstance(value, RawExpression):
        return value.payload
    if isinstance(value, Object):
        parts = [
            f"{json.dumps(k)}{_colon(indent)}{_encode(v, indent, level + 1)}"
            for k, v in value.entries.items()
        ]
        return _join(parts, "{", "}", indent, level)
    if isinstance(value, Array):
        parts = [_encode(v, indent, level + 1) for v in value.items]
        return _join(parts, "[", "]", indent, level)
    raise TypeError(f"Object of type {type(value).__name__} is not a converted value")


def _colon(indent: int | None) -> str:
    return ":" if indent is None else ": "


def _join(parts: list[str], open_: str, close: str, indent: int | None, level: int) -> str:
    if not parts:
        return open_ + close
    if indent is None:
        return open_ + ",".join(parts) + close
    pad = " " * indent
    inner = ",\n".join(pad * (level + 1) + p for p in parts)
    return f"{open_}\n{inner}\n{pad * level}{close}"
