"""Command layer: file-type gating and uniform results around the transforms."""

import logging
import os
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from rfcdoctool.checks.reference_checks import check_references
from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig
from rfcdoctool.formatting.document_formatter import format_document, full_formatting
from rfcdoctool.formatting.footnotes import process_footnotes
from rfcdoctool.formatting.numbering import fix_numbering
from rfcdoctool.formatting.toc_generator import process_toc
from rfcdoctool.models import CommandResult, ErrorCode
from rfcdoctool.utils.file_utils import is_supported_file
from rfcdoctool.utils.structure_scanner import find_sections

logger = logging.getLogger(__name__)

Command = Callable[..., CommandResult]


class CommandRegistry:
    """Central registry of document commands, keyed by CLI name."""

    _commands: Dict[str, Command] = {}

    @classmethod
    def register(cls, name: str) -> Callable:
        """Decorator to register a command under ``name``."""

        def decorator(func: Command) -> Command:
            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> CommandResult:
                logger.debug(f"Executing registered command: {name}")
                return func(*args, **kwargs)

            if name in cls._commands:
                logger.debug(f"Command {name} already registered, replacing")
            cls._commands[name] = wrapper
            return wrapper

        return decorator

    @classmethod
    def get(cls, name: str) -> Optional[Command]:
        return cls._commands.get(name)

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._commands)


def _unsupported(label: str, config: DocumentConfig) -> CommandResult:
    extensions = ", ".join(config.file_extensions)
    return CommandResult.failure(
        ErrorCode.FILE_TYPE_UNSUPPORTED,
        f"{label} command is only available for {extensions} files",
    )


def _processing_error(action: str, error: Exception, **kwargs) -> CommandResult:
    logger.error(f"Error {action}: {error}")
    return CommandResult.failure(ErrorCode.PROCESSING_ERROR, f"Error {action}: {error}", **kwargs)


@CommandRegistry.register("format")
def format_document_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Format Document", config)
    try:
        return CommandResult.ok(format_document(text, config))
    except Exception as e:
        return _processing_error("formatting document", e)


@CommandRegistry.register("toc")
def generate_toc_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Generate TOC", config)
    try:
        if not find_sections(text, config):
            return CommandResult.failure(
                ErrorCode.NO_SECTIONS_FOUND, "No sections found to generate TOC"
            )
        return CommandResult.ok(process_toc(text, config))
    except Exception as e:
        return _processing_error("generating TOC", e)


@CommandRegistry.register("footnotes")
def process_footnotes_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Number Footnotes", config)
    try:
        result = process_footnotes(text)
    except Exception as e:
        return _processing_error("numbering footnotes", e)
    if not result.success:
        return CommandResult.failure(ErrorCode.PROCESSING_ERROR, result.error)
    return CommandResult.ok(result.new_text)


@CommandRegistry.register("numbering")
def fix_numbering_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Fix Numbering", config)
    try:
        result = fix_numbering(text, config)
    except Exception as e:
        return _processing_error("fixing numbering", e, lines_changed=0)
    if not result.success:
        return CommandResult.failure(ErrorCode.PROCESSING_ERROR, result.error, lines_changed=0)
    return CommandResult.ok(result.fixed_text, lines_changed=result.lines_changed)


@CommandRegistry.register("references")
def check_references_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Check References", config)
    base_dir = os.path.dirname(os.path.abspath(file_path))
    try:
        result = check_references(text, base_dir)
    except Exception as e:
        return _processing_error("checking references", e, references_found=0)
    if not result.success:
        return CommandResult.failure(
            ErrorCode.PROCESSING_ERROR,
            result.diagnostics[0].message,
            diagnostics=result.diagnostics,
            references_found=0,
        )
    return CommandResult.ok(diagnostics=result.diagnostics, references_found=result.references_found)


@CommandRegistry.register("full")
def full_formatting_command(
    text: str, file_path: str, config: Optional[DocumentConfig] = None
) -> CommandResult:
    config = config or DEFAULT_CONFIG
    if not is_supported_file(file_path, config):
        return _unsupported("Full Formatting", config)
    try:
        return CommandResult.ok(full_formatting(text, config))
    except Exception as e:
        return _processing_error("applying full formatting", e)
