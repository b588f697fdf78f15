"""
Core code generation components.

Provides base classes and utilities used by the language generators.
"""

from .generator import (
    CodeGenerator,
    CyclicSchemaError,
    FormatError,
    GenerationResult,
    GenerationRun,
    GeneratorError,
    RenderError,
    SchemaConflictError,
    generate_code,
)
from .schema import PRIMITIVE_TYPES, SchemaNode, is_primitive, parse_schema_tree
from .naming import normalize, normalize_title, title
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationRun",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "CyclicSchemaError",
    "SchemaConflictError",
    "RenderError",
    "FormatError",
    # Schema tree
    "SchemaNode",
    "PRIMITIVE_TYPES",
    "is_primitive",
    "parse_schema_tree",
    # Naming utilities
    "normalize",
    "normalize_title",
    "title",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
