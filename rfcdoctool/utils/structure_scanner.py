"""Line classification and section scanning for structural documents.

Every transform starts here: the text is split into lines, each line is
tagged once with a :class:`~rfcdoctool.models.LineKind`, and callers dispatch
on the tag instead of re-testing overlapping patterns.
"""

import logging
from typing import List, Optional

from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig
from rfcdoctool.models import ClassifiedLine, LineKind, ListItem, Section, TOCLocation
from rfcdoctool.utils.pattern_cache import PATTERNS
from rfcdoctool.utils.text_utils import split_lines, split_metadata

logger = logging.getLogger(__name__)


def parse_section(line: str, index: int = 0) -> Optional[Section]:
    """Return the :class:`Section` a column-0 heading line declares, if any."""
    candidate = line.rstrip()
    if not candidate:
        return None

    match = PATTERNS.get("section.numbered").match(candidate)
    if match:
        numeral = match.group("number") or match.group("bare")
        return Section(
            name=candidate.strip(),
            level=len(numeral.split(".")),
            line=index,
            prefix=f"{numeral}.",
        )

    if PATTERNS.get("section.alternative").match(candidate):
        return Section(name=candidate.strip(), level=1, line=index, prefix=":")

    if PATTERNS.get("section.uppercase").match(candidate):
        return Section(name=candidate.strip(), level=1, line=index, prefix="")

    return None


def parse_list_item(line: str) -> Optional[ListItem]:
    """Split a bullet or ordered list line into indent, marker and the rest."""
    candidate = line.rstrip("\r")
    match = PATTERNS.get("list.ordered").match(candidate)
    if match:
        return ListItem(match.group("indent"), match.group("marker"), match.group("rest"), True)
    match = PATTERNS.get("list.bullet").match(candidate)
    if match:
        return ListItem(match.group("indent"), match.group("marker"), match.group("rest"), False)
    return None


def is_section(line: str) -> bool:
    """Whether the trimmed line has the shape of a section heading."""
    return parse_section(line.strip()) is not None


def is_metadata(line: str) -> bool:
    """Whether the trimmed line has the ``Key  Value`` metadata shape."""
    return split_metadata(line.strip()) is not None


def has_title(lines: List[str]) -> bool:
    """Whether the document opens with a title line and a dashed underline."""
    return (
        len(lines) > 1
        and bool(lines[0].strip())
        and PATTERNS.get("underline").match(lines[1].rstrip("\r")) is not None
    )


def _next_non_blank(lines: List[str], start: int) -> Optional[int]:
    for i in range(start, len(lines)):
        if lines[i].strip():
            return i
    return None


def _run_end(lines: List[str], start: int) -> int:
    end = start
    while end + 1 < len(lines) and lines[end + 1].strip():
        end += 1
    return end


def find_existing_toc(
    lines: List[str], config: Optional[DocumentConfig] = None
) -> Optional[TOCLocation]:
    """Locate the table of contents block, if the document has one.

    The block starts at the first line whose trimmed text equals the TOC
    header and ends at the last line of its entry run. A hand-written block
    (one whose entries are not all section-shaped) also takes in following
    runs until the next non-blank line is a section.
    """
    config = config or DEFAULT_CONFIG
    start = next((i for i, line in enumerate(lines) if line.strip() == config.toc_header), None)
    if start is None:
        return None

    end = start
    cursor = start + 1
    if cursor < len(lines) and PATTERNS.get("underline").match(lines[cursor].rstrip("\r")):
        end = cursor
        cursor += 1

    run_start = _next_non_blank(lines, cursor)
    if run_start is None:
        return TOCLocation(start_line=start, end_line=end)

    end = _run_end(lines, run_start)
    hand_written = not all(is_section(line) for line in lines[run_start : end + 1])
    while hand_written:
        following = _next_non_blank(lines, end + 1)
        if following is None or is_section(lines[following]):
            break
        end = _run_end(lines, following)

    logger.debug(f"Found existing TOC at lines {start}-{end}")
    return TOCLocation(start_line=start, end_line=end)


def _classify_one(line: str, index: int) -> ClassifiedLine:
    if not line.strip():
        return ClassifiedLine(index, line, LineKind.BLANK)
    if PATTERNS.get("quote").match(line):
        return ClassifiedLine(index, line, LineKind.QUOTE)

    section = parse_section(line, index)
    if section is not None:
        return ClassifiedLine(index, line, LineKind.SECTION, section=section)

    item = parse_list_item(line)
    if item is not None:
        return ClassifiedLine(index, line, LineKind.LIST_ITEM, list_item=item)

    if PATTERNS.get("code_block").match(line):
        return ClassifiedLine(index, line, LineKind.CODE_BLOCK)
    if PATTERNS.get("footnote.declaration").match(line.rstrip("\r")):
        return ClassifiedLine(index, line, LineKind.FOOTNOTE)
    return ClassifiedLine(index, line, LineKind.TEXT)


def _mark_metadata(classified: List[ClassifiedLine]) -> None:
    """Retag the first run of metadata-shaped text lines before any section."""
    in_run = False
    for i, entry in enumerate(classified):
        if entry.kind == LineKind.SECTION:
            return
        shaped = entry.kind == LineKind.TEXT and split_metadata(entry.text.rstrip()) is not None
        if shaped:
            classified[i] = ClassifiedLine(entry.index, entry.text, LineKind.METADATA)
            in_run = True
        elif in_run:
            return


def classify_lines(
    lines: List[str], config: Optional[DocumentConfig] = None
) -> List[ClassifiedLine]:
    """Tag every line with its structural kind."""
    config = config or DEFAULT_CONFIG
    toc = find_existing_toc(lines, config)
    titled = has_title(lines)

    classified: List[ClassifiedLine] = []
    for i, line in enumerate(lines):
        if toc is not None and toc.start_line <= i <= toc.end_line:
            classified.append(ClassifiedLine(i, line, LineKind.TOC))
        elif titled and i == 0:
            classified.append(ClassifiedLine(i, line, LineKind.TITLE))
        elif titled and i == 1:
            classified.append(ClassifiedLine(i, line, LineKind.UNDERLINE))
        else:
            classified.append(_classify_one(line, i))

    _mark_metadata(classified)
    return classified


def find_sections(text: str, config: Optional[DocumentConfig] = None) -> List[Section]:
    """Return every section heading outside the TOC block, in line order."""
    if not text:
        return []
    classified = classify_lines(split_lines(text), config)
    sections = [entry.section for entry in classified if entry.section is not None]
    logger.debug(f"Found {len(sections)} sections")
    return sections
