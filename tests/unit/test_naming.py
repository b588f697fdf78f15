"""Unit tests for identifier normalization."""

import pytest

from xsdgen.codegen.core.naming import (
    INITIALISM_PAIRS,
    dash_to_camel,
    normalize,
    normalize_title,
    replace_initialisms,
    snake_to_camel,
    squish,
    title,
)


def test_title_keeps_inner_case():
    """Title-casing only touches the first letter of each word."""
    assert title("userId") == "UserId"
    assert title("hello world") == "Hello World"
    assert title("line-item") == "Line-Item"


def test_title_does_not_split_on_underscore_or_digit():
    assert title("foo_bar") == "Foo_bar"
    assert title("9lives") == "9lives"
    assert title("") == ""


def test_initialisms_are_canonicalized():
    assert replace_initialisms("Id") == "ID"
    assert replace_initialisms("HttpServer") == "HTTPServer"
    assert replace_initialisms("userUrl") == "userURL"
    assert replace_initialisms("XmlUuid") == "XMLUUID"


def test_initialism_table_order_wins_on_overlap():
    """'Https' is listed before 'Http' and must be matched first."""
    assert replace_initialisms("Https") == "HTTPS"
    assert replace_initialisms("Uid") == "UID"
    assert replace_initialisms("Ui") == "UI"


def test_initialism_match_is_case_sensitive():
    assert replace_initialisms("http") == "http"
    assert replace_initialisms("ID") == "ID"


def test_initialism_table_is_complete():
    assert len(INITIALISM_PAIRS) == 36
    for old, new in INITIALISM_PAIRS:
        assert new == old.upper()


def test_squish_removes_spaces():
    assert squish("order date") == "orderdate"
    assert squish(" a b c ") == "abc"


def test_separator_folding():
    assert dash_to_camel("foo-bar-baz") == "fooBarBaz"
    assert snake_to_camel("foo_bar") == "fooBar"
    assert dash_to_camel("plain") == "plain"
    assert dash_to_camel("trailing-") == "trailing"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foo-bar_baz", "fooBarBaz"),
        ("userId", "userID"),
        ("order date", "orderdate"),
        ("Api-key", "APIKey"),
        ("xml", "xml"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("user-id", "UserID"),
        ("id", "ID"),
        ("line-item", "LineItem"),
        ("order date", "OrderDate"),
        ("birth_date", "BirthDate"),
        ("http-url", "HTTPURL"),
    ],
)
def test_normalize_title(raw, expected):
    assert normalize_title(raw) == expected


def test_initialisms_run_before_folding():
    """Tokens that only appear after camel-casing are left alone."""
    assert normalize_title("xml_http-request") == "XMLHttpRequest"


@pytest.mark.parametrize(
    "identifier", ["OrderID", "fooBarBaz", "HTTPServer", "UserID", "xmlData", "LineItem"]
)
def test_normalize_is_idempotent(identifier):
    once = normalize(identifier)
    assert normalize(once) == once
