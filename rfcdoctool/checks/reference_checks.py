import logging
import os
from typing import List, Optional

from rfcdoctool.config.validation_patterns import REFERENCE_TRAILING_PUNCTUATION
from rfcdoctool.models import (
    Diagnostic,
    DocumentReference,
    Range,
    ReferenceCheckResult,
    Section,
    Severity,
)
from rfcdoctool.utils.decorators import profile_performance
from rfcdoctool.utils.file_utils import read_file_content
from rfcdoctool.utils.pattern_cache import PATTERNS
from rfcdoctool.utils.structure_scanner import find_sections
from rfcdoctool.utils.text_utils import capitalize_words, line_starts, position_at

logger = logging.getLogger(__name__)


class ReferenceMessages:
    """Static message constants for reference checks."""

    FILE_NOT_FOUND = "Referenced file not found: {path}"
    ANCHOR_NOT_FOUND = "Anchor not found in target file: #{anchor}"
    READ_ERROR = "Error reading target file: {error}"
    CHECK_ERROR = "Error checking references: {error}"


def find_document_references(text: str) -> List[DocumentReference]:
    """Return every ``see: path[#anchor]`` occurrence with its range."""
    starts = line_starts(text)
    references = []
    for match in PATTERNS.get("reference").finditer(text):
        path = match.group("path")
        anchor = match.group("anchor") or ""
        end = match.end()
        if not anchor:
            stripped = path.rstrip(REFERENCE_TRAILING_PUNCTUATION)
            end -= len(path) - len(stripped)
            path = stripped
        else:
            path = path.rstrip(REFERENCE_TRAILING_PUNCTUATION)
        if not path:
            continue
        references.append(
            DocumentReference(
                file_path=path,
                anchor=anchor,
                range=Range(start=position_at(starts, match.start()), end=position_at(starts, end)),
            )
        )
    return references


def match_anchor(sections: List[Section], anchor: str) -> Optional[Section]:
    """Return the first section an anchor such as ``2-1`` or ``main-section`` names.

    An anchor with digit segments only ever names a numbered section.
    """
    parts = [part for part in anchor.split("-") if part]
    if not parts:
        return None

    digits = [part for part in parts if part.isdigit()]
    if digits:
        numeral = ".".join(digits)
        for section in sections:
            if section.is_numbered and section.numeral == numeral:
                return section
        return None

    uppercase = " ".join(parts).upper()
    for section in sections:
        if section.prefix == "" and section.name == uppercase:
            return section

    alternative = f": {capitalize_words(parts)}"
    for section in sections:
        if section.prefix == ":" and section.name == alternative:
            return section

    needles = {" ".join(parts).lower(), capitalize_words(parts).lower()}
    for section in sections:
        name = section.name.lower()
        if any(needle in name for needle in needles):
            return section

    return None


def anchor_exists(content: str, anchor: str) -> bool:
    """Whether ``anchor`` names a section of the document ``content``."""
    return match_anchor(find_sections(content), anchor) is not None


class ReferenceChecks:
    """Validates cross-document references against the file system."""

    def __init__(self, base_dir: str):
        self.base_dir = base_dir

    def validate_reference(self, reference: DocumentReference) -> Optional[Diagnostic]:
        """Return a diagnostic for a broken reference, or None when it resolves."""
        target_path = os.path.join(self.base_dir, reference.file_path)
        if not os.path.exists(target_path):
            logger.warning(f"Broken reference to {reference.file_path}")
            return self._diagnostic(
                ReferenceMessages.FILE_NOT_FOUND.format(path=reference.file_path), reference
            )

        if not reference.anchor:
            return None

        try:
            content = read_file_content(target_path)
        except OSError as e:
            logger.warning(f"Could not read {target_path}: {e}")
            return self._diagnostic(ReferenceMessages.READ_ERROR.format(error=e), reference)

        if not anchor_exists(content, reference.anchor):
            logger.warning(f"Anchor #{reference.anchor} not found in {reference.file_path}")
            return self._diagnostic(
                ReferenceMessages.ANCHOR_NOT_FOUND.format(anchor=reference.anchor), reference
            )
        return None

    @staticmethod
    def _diagnostic(message: str, reference: DocumentReference) -> Diagnostic:
        return Diagnostic(message=message, range=reference.range, severity=Severity.ERROR)

    def check_text(self, text: str) -> ReferenceCheckResult:
        try:
            references = find_document_references(text)
            diagnostics = []
            for reference in references:
                diagnostic = self.validate_reference(reference)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
            logger.info(
                f"Checked {len(references)} references, {len(diagnostics)} problems found"
            )
            return ReferenceCheckResult(
                success=True, diagnostics=diagnostics, references_found=len(references)
            )
        except Exception as e:
            logger.error(f"Error checking references: {e}")
            return ReferenceCheckResult(
                success=False,
                diagnostics=[Diagnostic(message=ReferenceMessages.CHECK_ERROR.format(error=e))],
                references_found=0,
            )


@profile_performance
def check_references(text: str, base_dir: str) -> ReferenceCheckResult:
    """Validate every reference in ``text`` against files under ``base_dir``."""
    return ReferenceChecks(base_dir).check_text(text)
