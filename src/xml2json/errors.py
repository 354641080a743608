"""Exceptions raised by xml2json."""

from __future__ import annotations


class Xml2JsonError(Exception):
    """Base class for all conversion failures."""


class InvalidInputError(Xml2JsonError, ValueError):
    """The input text is not well-formed or contains forbidden XML."""


class RecursionLimitExceeded(Xml2JsonError, RecursionError):
    """The element tree is nested deeper than the allowed ceiling.

    *depth* is ``None`` when the interpreter's own stack ran out before
    the configured ceiling was reached.
    """

    def __init__(self, limit: int, depth: int | None) -> None:
        if depth is None:
            message = (
                "Conversion ran out of interpreter stack before reaching "
                f"the allowed recursion depth of {limit}"
            )
        else:
            message = f"Conversion exceeded the allowed recursion depth of {limit}"
        super().__init__(message)
        self.limit = limit
        self.depth = depth
