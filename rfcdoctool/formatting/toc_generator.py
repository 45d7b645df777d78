"""Table of contents synthesis.

A TOC is rendered from the sections found outside any existing TOC block and
either replaces that block or is inserted after the document preamble.
"""

import logging
from typing import List, Optional

from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig
from rfcdoctool.models import LineKind, Section, TOCLocation
from rfcdoctool.utils.decorators import profile_performance
from rfcdoctool.utils.structure_scanner import (
    classify_lines,
    find_existing_toc,
    find_sections,
    has_title,
)
from rfcdoctool.utils.text_utils import split_document

logger = logging.getLogger(__name__)

__all__ = [
    "find_existing_toc",
    "find_toc_position",
    "generate_toc",
    "generate_toc_lines",
    "process_toc",
    "replace_toc",
]


def generate_toc_lines(
    sections: List[Section], config: Optional[DocumentConfig] = None
) -> List[str]:
    """Render the header, its underline, a blank line and one entry per section.

    Subsections of any depth share a single indent tier.
    """
    config = config or DEFAULT_CONFIG
    toc_lines = [config.toc_header, config.toc_underline, ""]
    for section in sections:
        indent = config.toc_indent if section.level > 1 else ""
        toc_lines.append(f"{indent}{section.name.strip()}")
    return toc_lines


def generate_toc(text: str, config: Optional[DocumentConfig] = None) -> List[str]:
    """TOC lines for ``text``, or an empty list when it has no sections."""
    sections = find_sections(text, config)
    if not sections:
        return []
    return generate_toc_lines(sections, config)


def find_toc_position(lines: List[str], config: Optional[DocumentConfig] = None) -> int:
    """Line index where a new TOC is inserted.

    After the metadata block and its following blank line; else after the
    first blank line following a title and underline; else line 3, or the
    end of a shorter document.
    """
    classified = classify_lines(lines, config)
    metadata_end = None
    for entry in classified:
        if entry.kind == LineKind.METADATA:
            metadata_end = entry.index
        elif metadata_end is not None:
            break

    if metadata_end is not None:
        position = metadata_end + 1
        if position < len(lines) and not lines[position].strip():
            position += 1
        return position

    if has_title(lines):
        for i in range(2, len(lines)):
            if not lines[i].strip():
                return i + 1

    return min(3, len(lines))


def replace_toc(
    text: str,
    toc_lines: List[str],
    location: Optional[TOCLocation],
    config: Optional[DocumentConfig] = None,
) -> str:
    """Swap ``location`` for ``toc_lines``, or insert them when there is no TOC yet."""
    if not toc_lines:
        return text

    lines, newline = split_document(text)
    if location is not None:
        logger.debug(f"Replacing TOC at lines {location.start_line}-{location.end_line}")
        result = lines[: location.start_line] + toc_lines + lines[location.end_line + 1 :]
    else:
        position = find_toc_position(lines, config)
        logger.debug(f"Inserting TOC at line {position}")
        # keep the header off the end of a preceding paragraph or heading
        lead = [""] if position > 0 and lines[position - 1].strip() else []
        result = lines[:position] + lead + toc_lines + [""] + lines[position:]
    return newline.join(result)


@profile_performance
def process_toc(text: str, config: Optional[DocumentConfig] = None) -> str:
    """Add or refresh the table of contents. Text without sections is returned as is."""
    config = config or DEFAULT_CONFIG
    toc_lines = generate_toc(text, config)
    if not toc_lines:
        logger.info("No sections found, leaving document unchanged")
        return text

    lines, _ = split_document(text)
    location = find_existing_toc(lines, config)
    result = replace_toc(text, toc_lines, location, config)
    logger.info(f"Generated TOC with {len(toc_lines) - 3} entries")
    return result
