"""Top-level package for the rfcdoctool Python API.

Formatting, table of contents, footnote, numbering and reference tools for
line-oriented structural documents.

Example
-------
>>> from rfcdoctool import process_toc
>>> print(process_toc("1. Intro\\n\\nText"))  # doctest: +SKIP
"""

from .checks.reference_checks import check_references
from .commands import (
    CommandRegistry,
    check_references_command,
    fix_numbering_command,
    format_document_command,
    full_formatting_command,
    generate_toc_command,
    process_footnotes_command,
)
from .config.document_config import DEFAULT_CONFIG, DocumentConfig, load_config
from .formatting.document_formatter import format_document, full_formatting
from .formatting.footnotes import process_footnotes
from .formatting.numbering import fix_numbering
from .formatting.toc_generator import process_toc
from .models import (
    CommandResult,
    ConfigurationError,
    Diagnostic,
    ErrorCode,
    ErrorInfo,
    FootnoteProcessResult,
    NumberingFixResult,
    ReferenceCheckResult,
    RFCDocError,
    Section,
    Severity,
)
from .utils.structure_scanner import find_sections

__version__ = "0.1.0"

__all__ = [
    "CommandRegistry",
    "CommandResult",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DocumentConfig",
    "ErrorCode",
    "ErrorInfo",
    "FootnoteProcessResult",
    "NumberingFixResult",
    "RFCDocError",
    "ReferenceCheckResult",
    "Section",
    "Severity",
    "check_references",
    "check_references_command",
    "find_sections",
    "fix_numbering",
    "fix_numbering_command",
    "format_document",
    "format_document_command",
    "full_formatting",
    "full_formatting_command",
    "generate_toc_command",
    "load_config",
    "process_footnotes",
    "process_footnotes_command",
    "process_toc",
]
