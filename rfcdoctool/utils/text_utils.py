import bisect
from typing import List, Optional, Tuple

from rfcdoctool.models import Position
from rfcdoctool.utils.pattern_cache import PATTERNS

_ROMAN_VALUES = [
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
]


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, so ``"\\n".join`` restores the text exactly."""
    return text.split("\n")


def split_document(text: str) -> Tuple[List[str], str]:
    """Split ``text`` into lines without their ``\\r`` and return the newline to rejoin with.

    Documents containing ``\\r\\n`` are rejoined with ``\\r\\n`` throughout, others
    with ``\\n``. A ``\\r`` on the final, unterminated line is kept as content.
    """
    newline = "\r\n" if "\r\n" in text else "\n"
    lines = split_lines(text)
    for i in range(len(lines) - 1):
        if lines[i].endswith("\r"):
            lines[i] = lines[i][:-1]
    return lines, newline


def line_starts(text: str) -> List[int]:
    """Offsets at which each line of ``text`` begins."""
    starts = [0]
    for i, char in enumerate(text):
        if char == "\n":
            starts.append(i + 1)
    return starts


def position_at(starts: List[int], offset: int) -> Position:
    """Convert a character offset to a zero-based line/character position."""
    line = bisect.bisect_right(starts, offset) - 1
    return Position(line=line, character=offset - starts[line])


def to_roman(value: int, upper: bool = False) -> str:
    if value <= 0:
        raise ValueError(f"Roman numerals start at 1, got {value}")
    parts = []
    for number, numeral in _ROMAN_VALUES:
        count, value = divmod(value, number)
        parts.append(numeral * count)
    result = "".join(parts)
    return result.upper() if upper else result


def to_letter(value: int, upper: bool = False) -> str:
    """1 -> a, 2 -> b ... 26 -> z, 27 -> aa."""
    if value <= 0:
        raise ValueError(f"Letter markers start at 1, got {value}")
    letters = []
    while value:
        value, remainder = divmod(value - 1, 26)
        letters.append(chr(ord("a") + remainder))
    result = "".join(reversed(letters))
    return result.upper() if upper else result


def is_roman(marker: str) -> bool:
    return bool(marker) and PATTERNS.get("roman").match(marker) is not None


def capitalize_words(words: List[str]) -> str:
    """Upper-case the first character of each word, leaving the rest as is."""
    return " ".join(word[:1].upper() + word[1:] for word in words)


def split_metadata(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for a metadata-shaped line, else ``None``."""
    match = PATTERNS.get("metadata").match(line)
    if not match:
        return None
    return match.group("key"), match.group("value")
