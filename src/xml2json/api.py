"""Module-level entry points."""

from __future__ import annotations

from .converter import DEFAULT_MAX_DEPTH, Converter
from .values import Value


def from_xml(
    xml_text: str | bytes,
    include_attributes: bool = False,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    indent: int | None = None,
) -> str:
    """Convert an XML string into a JSON string.

    Attributes are left out unless *include_attributes* is set.  Raises
    InvalidInputError for malformed or unsafe XML (nothing is converted)
    and RecursionLimitExceeded when the tree is deeper than *max_depth*.
    """
    return Converter(include_attributes, max_depth).from_xml(xml_text, indent=indent)


def xml_to_value(
    xml_text: str | bytes,
    include_attributes: bool = False,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Value]:
    """Like from_xml(), but return the ``{tag: value}`` mapping unencoded."""
    return Converter(include_attributes, max_depth).to_value(xml_text)
