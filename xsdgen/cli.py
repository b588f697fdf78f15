"""Command-line entry point for xsdgen."""

from __future__ import annotations

import argparse
from typing import Sequence

from . import __version__
from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``xsdgen`` command."""
    parser = argparse.ArgumentParser(
        prog="xsdgen",
        description="Generate Go struct declarations from an XML schema tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xsdgen schema.json --package models
  xsdgen schema.json -p models --prefix xsd --exported -o types.go
  xsdgen --stdin --on-conflict error < schema.json
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")

    add_codegen_args(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger.debug("Parsed arguments: %s", args)

    return handle_codegen_command(args)
