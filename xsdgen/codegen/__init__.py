"""
xsdgen code generation module.

Generates Go struct declarations from a parsed schema tree.
"""

from typing import Any, Dict, List, Optional, Union

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import SchemaNode, parse_schema_tree
from .core.config import GeneratorConfig, ConfigManager, load_config
from .languages.go import GoGenerator


def get_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GoGenerator:
    """Create a generator for the given configuration."""
    return GoGenerator(config)


def generate_from_schema(
    roots: List[SchemaNode],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate code for a list of root schema nodes.

    Args:
        roots: Root elements in document order
        config: GeneratorConfig or dict of overrides

    Returns:
        GenerationResult with generated code
    """
    return generate_code(get_generator(config), roots)


def quick_generate(schema_data: Any, **options) -> str:
    """
    Quick code generation from a decoded schema document.

    Args:
        schema_data: Node object, list of node objects, or JSON string
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(schema_data, str):
        import json

        schema_data = json.loads(schema_data)

    result = generate_from_schema(parse_schema_tree(schema_data), options)

    if result.success:
        return result.code
    else:
        raise GeneratorError(result.error_message) from result.exception


__all__ = [
    "CodeGenerator",
    "GoGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaNode",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "get_generator",
    "generate_from_schema",
    "quick_generate",
]
