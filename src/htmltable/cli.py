#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltable/cli.py
"""Command line interface for htmltable.

Renders a table definition file (JSON, YAML or TOML) to HTML::

    htmltable report.yaml --pretty -o report.html
    python -m htmltable report.json --columns name,city --header-as-footer

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from htmltable import __version__
from htmltable.constants import MISSING_COLUMN_POLICIES
from htmltable.exceptions import DefinitionError, HtmlTableError, RenderingError, ValidationError
from htmltable.loader import load_table
from htmltable.logging_utils import configure_logging
from htmltable.table import Table

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the htmltable command."""
    parser = argparse.ArgumentParser(
        prog="htmltable",
        description="Render a JSON, YAML or TOML table definition as an HTML table.",
    )
    parser.add_argument("definition", help="Table definition file (.json, .yaml, .yml or .toml)")
    parser.add_argument("-o", "--out", help="Write the markup to this file instead of stdout")
    parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Indent the markup (defaults to the definition's options)",
    )
    parser.add_argument(
        "--header-as-footer",
        action="store_true",
        help="Repeat the header values in the footer",
    )
    parser.add_argument("--columns", help="Comma separated column keys, in order")
    parser.add_argument(
        "--missing-column",
        choices=MISSING_COLUMN_POLICIES,
        help="What to do when a row has no value for a column",
    )
    parser.add_argument("--rich", action="store_true", help="Syntax highlight the markup on a terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, DefinitionError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def apply_overrides(table: Table, args: argparse.Namespace) -> Table:
    """Apply command line overrides to a loaded table."""
    if args.columns:
        table.set_columns(column.strip() for column in args.columns.split(",") if column.strip())
    if args.header_as_footer:
        table.use_header_as_footer()
    updates = {}
    if args.pretty is not None:
        updates["pretty"] = args.pretty
    if args.missing_column:
        updates["missing_column"] = args.missing_column
    if updates:
        table.set_options(table.options.create_updated(**updates))
    return table


def write_output(html: str, args: argparse.Namespace) -> None:
    """Write markup to the output file, or print it to stdout."""
    if args.out:
        Path(args.out).write_text(html, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(html), args.out)
        return

    if args.rich and sys.stdout.isatty():
        Console().print(Syntax(html, "html", theme="monokai", word_wrap=True))
        return

    sys.stdout.write(html if html.endswith("\n") else html + "\n")


def main(args: list[str] | None = None) -> int:
    """Execute the htmltable command."""
    parsed_args = create_parser().parse_args(args)
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        table = apply_overrides(load_table(parsed_args.definition), parsed_args)
        write_output(table.render(), parsed_args)
    except (HtmlTableError, OSError) as e:
        logger.debug("Rendering %s failed", parsed_args.definition, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
