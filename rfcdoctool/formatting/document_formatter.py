import logging
from typing import List, Optional

from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig
from rfcdoctool.formatting.footnotes import process_footnotes
from rfcdoctool.formatting.toc_generator import process_toc
from rfcdoctool.models import ClassifiedLine, LineKind
from rfcdoctool.utils.decorators import profile_performance
from rfcdoctool.utils.structure_scanner import classify_lines
from rfcdoctool.utils.text_utils import split_document, split_metadata

logger = logging.getLogger(__name__)


class DocumentFormatter:
    """Normalizes document layout line by line."""

    def __init__(self, config: Optional[DocumentConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def format_lines(self, lines: List[str]) -> List[str]:
        """Apply the layout rules to ``lines``.

        Sections get one blank line before and exactly one after, metadata
        values are aligned to a common column, and trailing whitespace is
        dropped everywhere outside the table of contents.
        """
        formatted: List[str] = []
        after_section = False

        for entry in classify_lines(lines, self.config):
            if entry.kind == LineKind.TOC:
                formatted.append(entry.text)
                after_section = False
                continue

            if entry.kind == LineKind.BLANK:
                if not after_section:
                    formatted.append("")
                continue

            after_section = False
            if entry.kind == LineKind.SECTION:
                if formatted and formatted[-1] != "":
                    formatted.append("")
                formatted.append(entry.text.rstrip())
                formatted.append("")
                after_section = True
            elif entry.kind == LineKind.METADATA:
                formatted.append(self._format_metadata(entry))
            else:
                formatted.append(entry.text.rstrip())

        return formatted

    def _format_metadata(self, entry: ClassifiedLine) -> str:
        key, value = split_metadata(entry.text.rstrip())
        width = max(self.config.metadata_key_width, len(key) + 2)
        return f"{key.ljust(width)}{value}"


@profile_performance
def format_document(text: str, config: Optional[DocumentConfig] = None) -> str:
    """Normalize layout: section spacing, metadata alignment, trailing whitespace."""
    lines, newline = split_document(text)
    formatted = DocumentFormatter(config).format_lines(lines)
    logger.info("Document formatted")
    return newline.join(formatted)


@profile_performance
def full_formatting(text: str, config: Optional[DocumentConfig] = None) -> str:
    """Format the layout, refresh the TOC, then renumber footnotes."""
    formatted = format_document(text, config)
    with_toc = process_toc(formatted, config)
    footnotes = process_footnotes(with_toc)
    if not footnotes.success:
        logger.warning(f"Footnote processing failed, keeping TOC output: {footnotes.error}")
        return with_toc
    return footnotes.new_text
