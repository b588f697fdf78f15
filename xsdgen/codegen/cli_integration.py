"""
CLI integration for code generation functionality.

Provides the command-line handlers for the codegen module.
"""

import argparse
import json
import sys
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.syntax import Syntax
from rich import box

from . import generate_from_schema
from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.schema import SchemaNode
from ..logging_config import get_logger
from ..utils import SchemaLoadError, decode_schema_tree, load_schema_tree

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Generated code goes to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to an existing CLI parser."""

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="Schema tree JSON file")
    input_group.add_argument("--url", help="URL to fetch the schema tree from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema tree from standard input"
    )

    codegen_group = parser.add_argument_group("code generation")
    codegen_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    codegen_group.add_argument(
        "--package",
        "-p",
        dest="package_name",
        metavar="NAME",
        help="Go package name (omit for a fragment without package clause)",
    )
    codegen_group.add_argument(
        "--prefix", metavar="PREFIX", help="Prefix for every generated type name"
    )
    codegen_group.add_argument(
        "--exported",
        action="store_true",
        default=None,
        help="Force generated type names to be exported",
    )
    codegen_group.add_argument(
        "--on-conflict",
        dest="conflict_strategy",
        choices=["first", "error"],
        help="What to do when two elements share a name but differ (default: first)",
    )
    codegen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate comments in output code",
    )
    codegen_group.add_argument(
        "--no-format",
        action="store_true",
        help="Skip the formatting and import resolution pass",
    )
    codegen_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        roots = _get_input_roots(args)
        config = _build_config(args)
        return _generate_and_output(roots, config, args)
    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("%s", e)
        return 1


def _get_input_roots(args: argparse.Namespace) -> list[SchemaNode]:
    """Load the schema tree from the selected input source."""
    try:
        if getattr(args, "file", None):
            return load_schema_tree(file_path=args.file)[1]
        elif getattr(args, "url", None):
            return load_schema_tree(url=args.url)[1]
        elif getattr(args, "stdin", False):
            return decode_schema_tree(json.load(sys.stdin), "<stdin>")
        else:
            raise CLIError("No input source specified")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON input: {e}") from e
    except (SchemaLoadError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    config_dict = {}

    if getattr(args, "package_name", None) is not None:
        config_dict["package_name"] = args.package_name

    if getattr(args, "prefix", None) is not None:
        config_dict["prefix"] = args.prefix

    if getattr(args, "exported", None):
        config_dict["exported"] = True

    if getattr(args, "conflict_strategy", None):
        config_dict["conflict_strategy"] = args.conflict_strategy

    if getattr(args, "no_comments", False):
        config_dict["add_comments"] = False

    if getattr(args, "no_format", False):
        config_dict["format_output"] = False

    if getattr(args, "output", None):
        config_dict["output_file"] = args.output

    try:
        config = load_config(
            custom_config=config_dict, config_file=getattr(args, "config", None)
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        err_console.print(f"[yellow]⚠️  {warning}[/yellow]")
        logger.warning("%s", warning)

    return config


def _generate_and_output(
    roots: list[SchemaNode], config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    result = generate_from_schema(roots, config)

    if not result.success:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception and result.exception.__cause__:
            err_console.print(f"[dim]Details: {result.exception.__cause__}[/dim]")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        err_console.print(
            f"[green]✓[/green] Generated Go code saved to [cyan]{output_path}[/cyan]"
        )
        logger.info("Wrote %s", output_path)
    else:
        # Plain stdout keeps the output pipeable; highlight only on a terminal
        if sys.stdout.isatty():
            console.print(Syntax(result.code, "go", theme="monokai"))
        else:
            sys.stdout.write(result.code)

    if getattr(args, "verbose", False) and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        err_console.print()
        err_console.print(metadata_table)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")
        err_console.print()

    return 0
