"""
Go code generator implementation.

Generates Go structs with XML tags from a parsed schema tree.
"""

from functools import partial
from typing import Dict, List, Optional, Set, Any
from pathlib import Path

from ...core.generator import (
    CodeGenerator,
    CyclicSchemaError,
    GenerationRun,
    RenderError,
    SchemaConflictError,
)
from ...core.naming import normalize_title
from ...core.schema import SchemaNode
from ...core.templates import TemplateError
from ....logging_config import get_logger
from .formatter import format_go_source
from .naming import is_go_keyword, shadows_predeclared
from .types import ConflictStrategy, field_type, is_primitive, type_name

logger = get_logger(__name__)


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with XML tags."""

    def __init__(self, config: Optional[Any] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.conflict_strategy = ConflictStrategy(self.config.conflict_strategy)

        # Bind the run-wide naming settings into the templates
        self.type_name = partial(
            type_name, prefix=self.config.prefix, exported=self.config.exported
        )
        self.template_engine.add_filter("type_name", self.type_name)
        self.template_engine.add_filter("field_type", field_type)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def walk(self, roots: List[SchemaNode]) -> GenerationRun:
        """
        Render one struct per distinct element name, depth first.

        Raises:
            CyclicSchemaError: If an element contains itself
            SchemaConflictError: If names clash and the strategy is ERROR
            RenderError: If a declaration fails to render
        """
        run = GenerationRun()
        for root in roots:
            if is_primitive(root):
                logger.debug("Skipping primitive root '%s'", root.name)
                continue
            self._walk(root, run, [])
        return run

    def _walk(self, node: SchemaNode, run: GenerationRun, path: List[SchemaNode]):
        if any(node is ancestor for ancestor in path):
            names = [ancestor.name for ancestor in path] + [node.name]
            raise CyclicSchemaError(names)

        if node.name in run.visited:
            self._check_conflict(node, run)
            return

        run.declarations.append(self.render_declaration(node))
        run.declared_types.append(self.type_name(node.name))
        run.visited.add(node.name)
        run.shapes[node.name] = node.shape()
        logger.debug("Declared '%s' from element '%s'", self.type_name(node.name), node.name)

        path.append(node)
        for child in node.children:
            if not is_primitive(child):
                self._walk(child, run, path)
        path.pop()

    def _check_conflict(self, node: SchemaNode, run: GenerationRun):
        """Handle an element whose name was already declared in this run."""
        if node.shape() == run.shapes.get(node.name):
            logger.debug("Element '%s' already declared", node.name)
            return

        if self.conflict_strategy is ConflictStrategy.ERROR:
            raise SchemaConflictError(node.name)

        message = (
            f"Element '{node.name}' redefined with different structure; "
            f"keeping the first definition"
        )
        logger.warning(message)
        run.warnings.append(message)

    def render_declaration(self, node: SchemaNode) -> str:
        """
        Render the struct declaration for a single element.

        Fields are ordered attributes, children, then character data.
        """
        context = {"node": node, "add_comments": self.config.add_comments}
        try:
            return self.render_template("record.go.j2", context)
        except TemplateError as e:
            raise RenderError(f"Could not render element '{node.name}': {e}") from e

    def assemble(self, run: GenerationRun) -> str:
        """Prefix the declarations with the package clause, if any."""
        parts = []
        if self.config.package_name:
            parts.append(self.get_package_declaration())
        parts.extend(run.declarations)
        return "\n\n".join(parts) + "\n"

    def get_package_declaration(self) -> Optional[str]:
        """Get the generated-code header and Go package clause."""
        if not self.config.package_name:
            return None
        try:
            return self.render_template(
                "package.go.j2", {"package_name": self.config.package_name}
            )
        except TemplateError as e:
            raise RenderError(f"Could not render package clause: {e}") from e

    def format_code(self, code: str) -> str:
        """Apply Go-specific formatting and import resolution."""
        if not self.config.format_output:
            return code
        return format_go_source(code)

    def validate_schemas(self, roots: List[SchemaNode]) -> List[str]:
        """Validate the schema tree for Go generation."""
        warnings = super().validate_schemas(roots)

        nodes = []
        seen = set()
        stack = list(reversed(roots))
        while stack:
            node = stack.pop()
            if id(node) in seen or is_primitive(node):
                continue
            seen.add(id(node))
            nodes.append(node)
            stack.extend(reversed(node.children))

        declared = {self.type_name(node.name) for node in nodes}
        for node in nodes:
            warnings.extend(self._validate_node(node, declared))

        return warnings

    def _validate_node(self, node: SchemaNode, declared: Set[str]) -> List[str]:
        warnings = []
        struct_name = self.type_name(node.name)

        if is_go_keyword(struct_name):
            warnings.append(
                f"Type name '{struct_name}' for element '{node.name}' is a Go keyword"
            )
        elif shadows_predeclared(struct_name):
            warnings.append(
                f"Type name '{struct_name}' for element '{node.name}' "
                f"shadows a predeclared Go identifier"
            )
        if not struct_name.isidentifier():
            warnings.append(
                f"Type name '{struct_name}' for element '{node.name}' "
                f"is not a valid Go identifier"
            )

        field_names: Dict[str, str] = {}
        members = list(node.attribs) + list(node.children)
        if node.cdata:
            members.append(node)
        for member in members:
            go_name = normalize_title(member.name)
            if not go_name.isidentifier():
                warnings.append(
                    f"Field name '{go_name}' for '{member.name}' of {struct_name} "
                    f"is not a valid Go identifier"
                )
            if go_name in field_names:
                warnings.append(
                    f"Fields '{field_names[go_name]}' and '{member.name}' of "
                    f"{struct_name} both map to {go_name}"
                )
            else:
                field_names[go_name] = member.name

        # Struct names come from element names, field types from element types
        for child in node.children:
            if is_primitive(child):
                continue
            referenced = self.type_name(field_type(child))
            if referenced not in declared:
                warnings.append(
                    f"Field '{normalize_title(child.name)}' of {struct_name} refers to "
                    f"type {referenced}, but element '{child.name}' is declared as "
                    f"{self.type_name(child.name)}"
                )

        return warnings
