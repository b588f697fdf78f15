"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement,
the error hierarchy, and the result container used by callers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Set, Tuple
from pathlib import Path

from .config import GeneratorConfig, load_config
from .schema import SchemaNode, count_nodes
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CyclicSchemaError(GeneratorError):
    """Raised when the element graph loops back onto itself."""

    def __init__(self, path: List[str]):
        self.path = path
        super().__init__(f"Cyclic schema: {' -> '.join(path)}")


class SchemaConflictError(GeneratorError):
    """Raised when two different elements share the same raw name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Element '{name}' is defined more than once with different structure"
        )


class RenderError(GeneratorError):
    """Raised when a declaration cannot be rendered."""

    pass


class FormatError(GeneratorError):
    """Raised when generated source fails the formatting pass."""

    pass


@dataclass
class GenerationRun:
    """
    State of a single generation run.

    Created empty at the start of a run and discarded afterwards, so
    one generator instance can be used for any number of runs.
    """

    visited: Set[str] = field(default_factory=set)
    shapes: Dict[str, Tuple] = field(default_factory=dict)
    declarations: List[str] = field(default_factory=list)
    declared_types: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Any] = None):
        """
        Initialize generator with optional configuration.

        Args:
            config: GeneratorConfig instance, or a dict of overrides
        """
        if config is None or isinstance(config, dict):
            config = load_config(custom_config=config)
        self.config: GeneratorConfig = config
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def walk(self, roots: List[SchemaNode]) -> GenerationRun:
        """
        Visit the schema tree and render one declaration per distinct type.

        Args:
            roots: Root nodes in document order

        Returns:
            The completed GenerationRun
        """
        pass

    @abstractmethod
    def assemble(self, run: GenerationRun) -> str:
        """Join the declarations of a run into one source buffer."""
        pass

    def generate(self, roots: List[SchemaNode]) -> str:
        """
        Generate formatted source for all declarations reachable from roots.

        Raises:
            GeneratorError: On any rendering or formatting failure
        """
        return self.format_code(self.assemble(self.walk(roots)))

    def generate_declarations(self, roots: List[SchemaNode]) -> List[str]:
        """Return the rendered declarations without header or formatting."""
        return self.walk(roots).declarations

    def validate_schemas(self, roots: List[SchemaNode]) -> List[str]:
        """
        Validate the schema tree for basic structural issues.

        Language generators should override this to add language-specific
        validation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        if not roots:
            warnings.append("No root elements - nothing to generate")
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        The base implementation returns the code unchanged.
        """
        return code

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result. Failed results carry no code."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, roots: List[SchemaNode]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        roots: Root schema nodes

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schemas(roots)

        run = generator.walk(roots)
        code = generator.format_code(generator.assemble(run))
        warnings.extend(run.warnings)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "root_count": len(roots),
            "element_count": count_nodes(roots),
            "declaration_count": len(run.declarations),
            "declared_types": ", ".join(run.declared_types),
            "package": generator.config.package_name or "(fragment)",
        }

        logger.info(
            "Generated %d declaration(s) from %d root(s)",
            len(run.declarations),
            len(roots),
        )
        return GenerationResult(code, warnings, metadata)

    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
