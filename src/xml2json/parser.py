"""Safe XML parsing, hardened against XXE and entity expansion.

All XML text reaching the converter goes through ``parse_xml`` first.
``defusedxml`` refuses entity declarations and external references; any
rejection or syntax error surfaces as ``InvalidInputError``.
"""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from defusedxml import ElementTree as SafeET
from defusedxml.common import DefusedXmlException

from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def parse_xml(xml_text: str | bytes) -> Element:
    """Parse *xml_text* and return the root element.

    Raises:
        InvalidInputError: If the text is empty, malformed, or contains
            forbidden constructs (entities, external references).
    """
    if not xml_text or not xml_text.strip():
        raise InvalidInputError("Function from_xml was called with empty input")

    try:
        return SafeET.fromstring(xml_text)
    except DefusedXmlException as exc:
        logger.warning("Blocked unsafe XML content: %s", exc)
        raise InvalidInputError(
            "Function from_xml was called with forbidden XML constructs"
        ) from exc
    except SafeET.ParseError as exc:
        logger.warning("Failed to parse XML content: %s", exc)
        raise InvalidInputError(
            f"Function from_xml was called with invalid XML: {exc}"
        ) from exc
