"""Converter: recursive XML element tree → value tree."""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from .encoder import encode
from .errors import RecursionLimitExceeded
from .extractor import extract_value
from .parser import parse_xml
from .values import (
    ATTRIBUTES_KEY,
    TEXT_KEY,
    Array,
    Object,
    Value,
    has_text,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 25


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def convert(
    element: Element,
    include_attributes: bool = False,
    depth: int = 0,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Value]:
    """Convert *element* into a single-entry mapping ``{tag: value}``.

    - Leaf without attributes (or with attributes excluded) → bare scalar
    - Leaf with included attributes → Object with ``@attributes``/``@text``
    - Element with children → Object keyed by child tag; repeated tags
      become an Array in document order

    Raises RecursionLimitExceeded when *depth* goes past *max_depth*.
    """
    if depth > max_depth:
        logger.debug("Depth %d exceeds limit %d at <%s>", depth, max_depth, element.tag)
        raise RecursionLimitExceeded(max_depth, depth)

    name = local_name(element.tag)
    value = extract_value(element)
    children = list(element)

    if not children:
        if element.attrib and include_attributes:
            entries: dict[str, Value] = {ATTRIBUTES_KEY: _attributes(element)}
            if has_text(value):
                entries[TEXT_KEY] = value
            return {name: Object(entries)}
        return {name: value}

    entries = {}
    promoted: set[str] = set()
    for child in children:
        child_name, child_value = next(iter(
            convert(child, include_attributes, depth + 1, max_depth=max_depth).items()
        ))
        if child_name not in entries:
            entries[child_name] = child_value
            continue
        if child_name not in promoted:
            entries[child_name] = Array([entries[child_name]])
            promoted.add(child_name)
        entries[child_name].items.append(child_value)

    if element.attrib and include_attributes:
        entries[ATTRIBUTES_KEY] = _attributes(element)

    if has_text(value):
        entries[TEXT_KEY] = value

    return {name: Object(entries)}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def local_name(tag: str) -> str:
    """Strip a ``{uri}`` namespace part from a tag or attribute name.

    Names are not merged: ``a:k`` and ``b:k`` both become ``k``.
    """
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _attributes(element: Element) -> Object:
    # attributes sharing a local name collapse; the last one in document order wins
    return Object({
        local_name(k): extract_value(v) for k, v in element.attrib.items()
    })


# ---------------------------------------------------------------------------
# Converter (stateful facade)
# ---------------------------------------------------------------------------

class Converter:
    """Holds conversion settings across calls.

    Usage::

        conv = Converter(include_attributes=True)
        conv.from_xml('<a x="1">hi</a>')   # → '{"a":{"@attributes":...}}'
        conv.max_depth = 50                # applies from the next call on
    """

    def __init__(
        self,
        include_attributes: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.include_attributes = include_attributes
        self.max_depth = max_depth

    def convert(self, element: Element) -> dict[str, Value]:
        """Convert an already-parsed element tree."""
        max_depth = self.max_depth
        try:
            result = convert(element, self.include_attributes, 0, max_depth=max_depth)
        except RecursionLimitExceeded:
            raise
        except RecursionError as exc:
            logger.debug("Interpreter stack exhausted below max_depth=%d", max_depth)
            raise RecursionLimitExceeded(max_depth, None) from exc
        logger.debug("Converted <%s> (max_depth=%d)", next(iter(result)), max_depth)
        return result

    def to_value(self, xml_text: str | bytes) -> dict[str, Value]:
        """Parse *xml_text* and convert it, without encoding."""
        return self.convert(parse_xml(xml_text))

    def from_xml(self, xml_text: str | bytes, indent: int | None = None) -> str:
        """Parse, convert and encode *xml_text* to JSON text."""
        value = self.to_value(xml_text)
        try:
            return encode(value, indent=indent)
        except RecursionError as exc:
            raise RecursionLimitExceeded(self.max_depth, None) from exc
