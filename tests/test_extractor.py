"""Tests for xml2json.extractor."""

import xml.etree.ElementTree as ET

import pytest

from xml2json.extractor import direct_text, extract_value
from xml2json.values import RawExpression, Scalar


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def test_trims_outer_whitespace():
    assert extract_value("  hello world \n") == Scalar("hello world")

def test_keeps_inner_whitespace():
    assert extract_value("a   b") == Scalar("a   b")

def test_none_is_empty():
    assert extract_value(None) == Scalar("")

def test_element_text():
    assert extract_value(ET.fromstring("<a> hi </a>")) == Scalar("hi")

def test_element_without_text():
    assert extract_value(ET.fromstring("<a/>")) == Scalar("")


# ---------------------------------------------------------------------------
# Expression escape
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text, payload", [
    ('new Xml2Json.Json.Expr("true")', "true"),
    ("new Xml2Json.Json.Expr('42')", "42"),
    ('  new Laminas\\Json\\Expr ( "foo.bar" )  ', "foo.bar"),
    ('new Zend_Json_Expr("x")', "x"),
    ('new App.Json.Expr("a \\" b")', 'a \\" b'),
])
def test_expression_matches(text, payload):
    assert extract_value(text) == RawExpression(payload)

@pytest.mark.parametrize("text", [
    "Xml2Json.Json.Expr(\"true\")",
    "new Xml2Json.Json.Expr(true)",
    "new Xml2Json.Json.Expr(\"true\") + 1",
    "prefix new Xml2Json.Json.Expr(\"true\")",
])
def test_expression_near_misses_are_scalars(text):
    assert isinstance(extract_value(text), Scalar)

def test_payload_is_not_trimmed():
    assert extract_value('new A.Json.Expr(" x ")') == RawExpression(" x ")

def test_element_expression():
    el = ET.fromstring("<flag>new A.Json.Expr('false')</flag>")
    assert extract_value(el) == RawExpression("false")


# ---------------------------------------------------------------------------
# direct_text
# ---------------------------------------------------------------------------

def test_direct_text_skips_child_text():
    el = ET.fromstring("<a>one<b>inner</b>two</a>")
    assert direct_text(el) == "onetwo"
