"""Repair of section and ordered-list numbering.

Numbers are recomputed from nesting alone. Two counter stacks are threaded
through one scan over the classified lines: one for numbered sections, one
for the ordered list currently open.
"""

import logging
import re
from typing import List, Optional

from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig
from rfcdoctool.models import (
    ClassifiedLine,
    CounterFrame,
    LineKind,
    NumberingFixResult,
    NumberingStyle,
)
from rfcdoctool.utils.decorators import profile_performance
from rfcdoctool.utils.structure_scanner import classify_lines
from rfcdoctool.utils.text_utils import is_roman, split_document, to_letter, to_roman

logger = logging.getLogger(__name__)

_LEADING_NUMERAL = re.compile(r"^\d+(?:\.\d+)*")


def marker_style(marker: str) -> NumberingStyle:
    """Infer the numbering style a list marker is written in."""
    if marker.isdigit():
        return NumberingStyle.NUMERIC
    if marker in ("i", "I") or (len(marker) > 1 and is_roman(marker)):
        return NumberingStyle.ROMAN
    return NumberingStyle.LETTERED


def render_marker(value: int, style: NumberingStyle, upper: bool = False) -> str:
    if style == NumberingStyle.LETTERED:
        return to_letter(value, upper)
    if style == NumberingStyle.ROMAN:
        return to_roman(value, upper)
    return str(value)


class NumberingFixer:
    """Single-pass numbering state machine."""

    def __init__(self, config: Optional[DocumentConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._sections: List[CounterFrame] = []
        self._lists: List[CounterFrame] = []
        self._root_bucket: Optional[int] = None

    def fix_lines(self, lines: List[str]) -> List[str]:
        self._sections = []
        self._close_list()

        fixed = []
        for entry in classify_lines(lines, self.config):
            if entry.kind == LineKind.SECTION:
                fixed.append(self._fix_section(entry))
                self._close_list()
            elif entry.kind == LineKind.LIST_ITEM and entry.list_item.ordered:
                fixed.append(self._fix_list_item(entry))
            else:
                if entry.kind == LineKind.BLANK:
                    self._close_list()
                fixed.append(entry.text)
        return fixed

    def _close_list(self) -> None:
        self._lists = []
        self._root_bucket = None

    def _fix_section(self, entry: ClassifiedLine) -> str:
        section = entry.section
        if not section.is_numbered:
            return entry.text

        depth = section.level
        stack = self._sections
        while stack and stack[-1].depth > depth:
            stack.pop()
        if stack and stack[-1].depth == depth:
            stack[-1].advance()
        else:
            next_depth = stack[-1].depth + 1 if stack else 1
            for d in range(next_depth, depth + 1):
                stack.append(CounterFrame(d, NumberingStyle.SECTION_DOTTED))

        numeral = ".".join(str(frame.value) for frame in stack)
        old = _LEADING_NUMERAL.match(entry.text).group(0)
        if old != numeral:
            logger.debug(f"Line {entry.index}: section {old} -> {numeral}")
        return numeral + entry.text[len(old):]

    def _nested_style(self, depth: int) -> NumberingStyle:
        cycle = self.config.list_styles
        root_style = self._lists[0].style
        if root_style in cycle:
            return cycle[(cycle.index(root_style) + depth) % len(cycle)]
        return cycle[depth % len(cycle)]

    def _fix_list_item(self, entry: ClassifiedLine) -> str:
        item = entry.list_item
        bucket = item.indent_width // self.config.list_indent_width

        if self._root_bucket is None or bucket < self._root_bucket:
            self._root_bucket = bucket
            self._lists = [CounterFrame(0, marker_style(item.marker))]
        else:
            depth = bucket - self._root_bucket
            stack = self._lists
            while stack[-1].depth > depth:
                stack.pop()
            if stack[-1].depth == depth:
                stack[-1].advance()
            else:
                for d in range(stack[-1].depth + 1, depth + 1):
                    stack.append(CounterFrame(d, self._nested_style(d)))

        frame = self._lists[-1]
        upper = item.marker.isalpha() and item.marker.isupper()
        marker = render_marker(frame.value, frame.style, upper)
        if marker != item.marker:
            logger.debug(f"Line {entry.index}: list marker {item.marker} -> {marker}")
        ending = "\r" if entry.text.endswith("\r") else ""
        return f"{item.indent}{marker}.{item.rest}{ending}"


def count_changed_lines(original: List[str], fixed: List[str]) -> int:
    """Number of differing lines plus any difference in length."""
    changed = sum(1 for before, after in zip(original, fixed) if before != after)
    return changed + abs(len(original) - len(fixed))


@profile_performance
def fix_numbering(text: str, config: Optional[DocumentConfig] = None) -> NumberingFixResult:
    """Recompute section and ordered-list numbering from nesting depth."""
    try:
        lines, newline = split_document(text)
        fixed_lines = NumberingFixer(config).fix_lines(lines)
        lines_changed = count_changed_lines(lines, fixed_lines)
        logger.info(f"Numbering fixed, {lines_changed} lines changed")
        return NumberingFixResult(
            success=True, fixed_text=newline.join(fixed_lines), lines_changed=lines_changed
        )
    except Exception as e:
        logger.error(f"Error fixing numbering: {e}")
        return NumberingFixResult(
            success=False, error=f"Error fixing numbering: {e}", lines_changed=0
        )
