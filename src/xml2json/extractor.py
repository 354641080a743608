"""Scalar extraction from element text and attribute values."""

from __future__ import annotations

import re
from xml.etree.ElementTree import Element

from .values import RawExpression, Scalar

# new Xml2Json.Json.Expr("payload") -- separators may also be "_" or "\"
_EXPR_RE = re.compile(
    r"""^\s*new\s+[A-Za-z_]\w*[._\\]Json[._\\]Expr\s*\(\s*["'](.*)["']\s*\)\s*$"""
)


def direct_text(element: Element) -> str:
    """Text that belongs to *element* itself, outside any child element."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def extract_value(node: Element | str | None) -> Scalar | RawExpression:
    """Return the value of an element's own text or of an attribute string.

    Text matching the expression escape becomes a ``RawExpression`` holding
    the quoted payload verbatim; anything else is a trimmed ``Scalar``.
    """
    if node is None:
        text = ""
    elif isinstance(node, str):
        text = node
    else:
        text = direct_text(node)

    m = _EXPR_RE.match(text)
    if m:
        return RawExpression(m.group(1))
    return Scalar(text.strip())
