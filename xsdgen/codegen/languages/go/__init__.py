"""
Go code generator module.

Generates Go structs with XML tags from a parsed schema tree.
"""

from .generator import GoGenerator
from .formatter import format_go_source
from .naming import GO_RESERVED_WORDS, validate_go_package_name
from .types import ConflictStrategy, field_type, type_name

__all__ = [
    "GoGenerator",
    "format_go_source",
    "ConflictStrategy",
    "type_name",
    "field_type",
    "GO_RESERVED_WORDS",
    "validate_go_package_name",
]
