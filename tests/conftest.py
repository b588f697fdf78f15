"""
Pytest configuration and shared fixtures for xsdgen tests.

Provides sample schema trees and generator instances used across
the test suite.
"""

import json
import logging

import pytest

from xsdgen.codegen.core.schema import SchemaNode
from xsdgen.codegen.languages.go import GoGenerator


@pytest.fixture(autouse=True)
def reset_xsdgen_logger():
    """Undo handlers and levels installed by the CLI between tests."""
    yield
    logger = logging.getLogger("xsdgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def line_item():
    """Repeated order line with only primitive children."""
    return SchemaNode(
        name="line-item",
        type="LineItem",
        list=True,
        children=[
            SchemaNode(name="sku", type="string"),
            SchemaNode(name="quantity", type="int"),
        ],
    )


@pytest.fixture
def order(line_item):
    """The Order element: one attribute and one repeated child."""
    return SchemaNode(
        name="Order",
        type="Order",
        attribs=[SchemaNode(name="id", type="int")],
        children=[line_item],
    )


@pytest.fixture
def book():
    """An element mixing attributes, a chardata child and nested structure."""
    title = SchemaNode(
        name="title",
        type="string",
        attribs=[SchemaNode(name="lang", type="string")],
        cdata=True,
    )
    author = SchemaNode(
        name="author",
        type="Author",
        list=True,
        children=[
            SchemaNode(name="full-name", type="string"),
            SchemaNode(name="birth_date", type="time.Time"),
        ],
    )
    return SchemaNode(
        name="book",
        type="Book",
        attribs=[
            SchemaNode(name="isbn", type="string"),
            SchemaNode(name="api-version", type="float64"),
        ],
        children=[
            title,
            author,
            SchemaNode(name="page-count", type="int"),
            SchemaNode(name="keyword", type="string", list=True),
        ],
    )


@pytest.fixture
def generator():
    """Generator with default settings (fragment mode)."""
    return GoGenerator()


@pytest.fixture
def exported_generator():
    """Generator that exports every type name."""
    return GoGenerator({"exported": True})


@pytest.fixture
def schema_file(tmp_path, order):
    """The Order schema tree written as JSON."""
    path = tmp_path / "order.json"
    path.write_text(json.dumps(order.to_dict()), encoding="utf-8")
    return path
