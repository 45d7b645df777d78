"""CLI module for rfcdoctool."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rfcdoctool.commands import CommandRegistry
from rfcdoctool.config.document_config import load_config
from rfcdoctool.logging_config import setup_logging
from rfcdoctool.models import CommandResult, ConfigurationError
from rfcdoctool.processing import process_file

logger = logging.getLogger(__name__)


def _safe_print(text: str, end: str = os.linesep) -> None:
    """Print ``text`` to stdout, replacing unsupported characters.

    This avoids ``UnicodeEncodeError`` on terminals that cannot handle
    certain Unicode characters.
    """
    encoding = sys.stdout.encoding or "utf-8"
    try:
        sys.stdout.write(text + end)
        sys.stdout.flush()
    except UnicodeEncodeError:
        sys.stdout.buffer.write((text + end).encode(encoding, errors="replace"))
        sys.stdout.flush()


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rfcdoctool", description="Format and check structural .rfc documents"
    )
    parser.add_argument("command", choices=CommandRegistry.names(), help="Command to run")
    parser.add_argument("file", type=str, help="Path to the document")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file (defaults to $RFCDOCTOOL_CONFIG)",
    )
    parser.add_argument(
        "--in-place",
        action="store_true",
        help="Rewrite the file instead of printing the result",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser


def _report(result: CommandResult, args: argparse.Namespace) -> int:
    if not result.success:
        logger.error(result.error_message)
        if result.error and result.error.details:
            logger.error(result.error.details)
        return 1

    if args.command == "references":
        for diagnostic in result.diagnostics:
            _safe_print(diagnostic.format(args.file))
        logger.info(f"{result.references_found} references found")
        return 1 if result.diagnostics else 0

    if result.lines_changed is not None:
        logger.info(f"{result.lines_changed} lines changed")
    if not args.in_place:
        text = result.result or ""
        _safe_print(text, end="" if text.endswith("\n") else os.linesep)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application."""
    parser = _create_argument_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    setup_logging(debug=args.debug, log_file=args.log_file)
    if args.debug:
        logger.debug("Debug mode enabled")

    try:
        config = load_config(args.config)
        result = process_file(args.file, args.command, config, in_place=args.in_place)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    except FileNotFoundError:
        logger.error(f"File not found: {args.file}")
        return 1
    except PermissionError:
        logger.error(f"Permission denied: {args.file}")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    return _report(result, args)


if __name__ == "__main__":
    sys.exit(main())
