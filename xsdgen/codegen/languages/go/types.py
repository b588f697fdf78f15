"""
Go type resolution for generated declarations.

Decides the declared name of each generated struct and which raw
name feeds it for a given field.
"""

from enum import Enum

from ...core.naming import normalize, title
from ...core.schema import PRIMITIVE_TYPES, SchemaNode, is_primitive


class ConflictStrategy(Enum):
    """Strategies for elements that share a name but differ in structure."""

    FIRST = "first"  # Keep the first definition, warn about the rest
    ERROR = "error"  # Fail the run


def type_name(name: str, prefix: str = "", exported: bool = False) -> str:
    """
    Resolve the Go type name for a schema type.

    Primitive names are already Go spellings and pass through untouched.

    Args:
        name: Raw type name from the schema
        prefix: Prepended to every generated type name
        exported: Force the name to start upper-case

    Returns:
        Go type name
    """
    if name in PRIMITIVE_TYPES:
        return name
    if prefix:
        name = prefix + title(name)
    if exported:
        name = title(name)
    return normalize(name)


def field_type(node: SchemaNode) -> str:
    """
    Return the raw type name backing a child field.

    A character-data field must point to a struct even when the
    element type is a built-in, so its own name is used instead.
    """
    if node.cdata:
        return node.name
    return node.type


__all__ = ["ConflictStrategy", "type_name", "field_type", "is_primitive"]
