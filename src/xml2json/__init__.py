"""xml2json — XML element trees to JSON values."""

from .api import from_xml, xml_to_value
from .converter import DEFAULT_MAX_DEPTH, Converter, convert
from .encoder import encode
from .errors import InvalidInputError, RecursionLimitExceeded, Xml2JsonError
from .extractor import extract_value
from .parser import parse_xml
from .values import (
    ATTRIBUTES_KEY,
    TEXT_KEY,
    Array,
    Object,
    RawExpression,
    Scalar,
    Value,
    to_python,
)

__all__ = [
    "from_xml",
    "xml_to_value",
    "convert",
    "Converter",
    "DEFAULT_MAX_DEPTH",
    "encode",
    "extract_value",
    "parse_xml",
    "Xml2JsonError",
    "InvalidInputError",
    "RecursionLimitExceeded",
    "ATTRIBUTES_KEY",
    "TEXT_KEY",
    "Array",
    "Object",
    "RawExpression",
    "Scalar",
    "Value",
    "to_python",
]
