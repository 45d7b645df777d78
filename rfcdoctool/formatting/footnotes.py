import logging
from typing import Dict, List

from rfcdoctool.models import FootnoteDeclaration, FootnoteProcessResult, FootnoteReference
from rfcdoctool.utils.decorators import profile_performance
from rfcdoctool.utils.pattern_cache import PATTERNS

logger = logging.getLogger(__name__)


def find_footnote_declarations(text: str) -> List[FootnoteDeclaration]:
    """Return every ``[n] text`` declaration line in source order."""
    declarations = [
        FootnoteDeclaration(
            original_number=match.group("number"),
            text=match.group("text"),
            position=match.start(),
        )
        for match in PATTERNS.get("footnote.declaration").finditer(text)
    ]
    return sorted(declarations, key=lambda d: d.position)


def find_footnote_references(text: str) -> List[FootnoteReference]:
    """Return the in-text ``[n]`` tokens, skipping the declaration prefixes."""
    declaration_starts = {d.position for d in find_footnote_declarations(text)}
    return [
        FootnoteReference(original_number=match.group("number"), position=match.start())
        for match in PATTERNS.get("footnote.token").finditer(text)
        if match.start() not in declaration_starts
    ]


def create_footnote_number_map(declarations: List[FootnoteDeclaration]) -> Dict[str, str]:
    """Map each original number to its rank in declaration order.

    A number declared more than once keeps the rank of its first declaration.
    """
    footnote_map: Dict[str, str] = {}
    for declaration in declarations:
        if declaration.original_number in footnote_map:
            logger.warning(f"Footnote [{declaration.original_number}] is declared more than once")
            continue
        footnote_map[declaration.original_number] = str(len(footnote_map) + 1)
    return footnote_map


def update_footnote_numbers(text: str, footnote_map: Dict[str, str]) -> str:
    """Rewrite every mapped ``[n]`` token in one left-to-right pass."""

    def _replace(match) -> str:
        new_number = footnote_map.get(match.group("number"))
        if new_number is None:
            return match.group(0)
        return f"[{new_number}]"

    return PATTERNS.get("footnote.token").sub(_replace, text)


@profile_performance
def process_footnotes(text: str) -> FootnoteProcessResult:
    """Renumber footnotes into declaration order and update every reference."""
    try:
        declarations = find_footnote_declarations(text)
        if not declarations:
            return FootnoteProcessResult(success=True, new_text=text)

        footnote_map = create_footnote_number_map(declarations)
        for reference in find_footnote_references(text):
            if reference.original_number not in footnote_map:
                logger.warning(
                    f"Footnote reference [{reference.original_number}] at offset "
                    f"{reference.position} has no declaration"
                )

        new_text = update_footnote_numbers(text, footnote_map)
        logger.info(f"Renumbered {len(footnote_map)} footnotes")
        return FootnoteProcessResult(success=True, new_text=new_text)
    except Exception as e:
        logger.error(f"Error processing footnotes: {e}")
        return FootnoteProcessResult(success=False, error=f"Error processing footnotes: {e}")
