import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rfcdoctool.formatting.document_formatter import format_document, full_formatting
from rfcdoctool.formatting.footnotes import find_footnote_declarations, process_footnotes
from rfcdoctool.formatting.numbering import fix_numbering
from rfcdoctool.formatting.toc_generator import generate_toc_lines, process_toc
from rfcdoctool.utils.structure_scanner import find_sections

DOCUMENT_LINES = [
    "",
    "",
    "INTRODUCTION",
    "MAIN SECTION",
    "1. Intro",
    "2. Main",
    "2.1 Sub",
    "3.2.1. Deep",
    ": Alternative Section",
    "Body text.",
    "Body text with trailing space   ",
    "Author  Jane Doe",
    "Date    2024-01-01",
    "- bullet",
    "    * nested bullet",
    "a. lettered item",
    "    1. nested item",
    "        b. deeper item",
    "    code block",
    "> quoted",
    "See note [1].",
    "See note [2] and [3].",
    "TABLE OF CONTENTS",
    "-----------------",
]

documents = st.lists(st.sampled_from(DOCUMENT_LINES), max_size=30).map("\n".join)


@pytest.mark.property
@settings(deadline=None)
@given(text=documents)
def test_process_toc_idempotent(text):
    once = process_toc(text)
    assert process_toc(once) == once


@pytest.mark.property
@settings(deadline=None)
@given(text=documents)
def test_format_document_idempotent(text):
    once = format_document(text)
    assert format_document(once) == once


@pytest.mark.property
@settings(deadline=None)
@given(text=documents)
def test_full_formatting_idempotent(text):
    once = full_formatting(text)
    assert full_formatting(once) == once


@pytest.mark.property
@settings(deadline=None)
@given(text=documents)
def test_fix_numbering_second_pass_is_clean(text):
    first = fix_numbering(text)
    assert first.success
    assert fix_numbering(first.fixed_text).lines_changed == 0


@pytest.mark.property
@settings(deadline=None)
@given(text=documents)
def test_toc_has_one_entry_per_section(text):
    sections = find_sections(text)
    lines = generate_toc_lines(sections)
    assert len(lines) == 3 + len(sections)
    assert [line.strip() for line in lines[3:]] == [s.name for s in sections]


@pytest.mark.property
@settings(deadline=None)
@given(
    numbers=st.lists(st.integers(min_value=1, max_value=999), min_size=1, max_size=12, unique=True)
)
def test_footnote_bijection(numbers):
    body = " ".join(f"ref[{n}]" for n in reversed(numbers))
    declarations = "\n".join(f"[{n}] note {n}" for n in numbers)
    result = process_footnotes(f"{body}\n\n{declarations}")
    assert result.success

    new_declarations = find_footnote_declarations(result.new_text)
    assert [d.original_number for d in new_declarations] == [
        str(i) for i in range(1, len(numbers) + 1)
    ]
    for new_number, original in enumerate(numbers, start=1):
        assert f"[{new_number}] note {original}" in result.new_text

    new_body = result.new_text.split("\n\n")[0]
    references = [int(n) for n in re.findall(r"\[(\d+)\]", new_body)]
    assert sorted(references) == list(range(1, len(numbers) + 1))


@pytest.mark.property
@settings(deadline=None)
@given(depths=st.lists(st.integers(min_value=1, max_value=3), min_size=1, max_size=15))
def test_section_numbering_monotonic(depths):
    lines = []
    for depth in depths:
        numeral = ".".join(["9"] * depth)
        lines.extend([f"{numeral}. Title", ""])
    fixed = fix_numbering("\n".join(lines)).fixed_text

    previous = []
    for line in fixed.split("\n"):
        if not line:
            continue
        current = [int(part) for part in line.split(" ")[0].rstrip(".").split(".")]
        if previous:
            shared = min(len(previous), len(current))
            if len(current) <= len(previous):
                # same or shallower depth: the last counter advances by one
                assert current[: len(current) - 1] == previous[: len(current) - 1]
                assert current[-1] == previous[len(current) - 1] + 1
            else:
                assert current[:shared] == previous[:shared]
                assert all(value == 1 for value in current[shared:])
        else:
            assert all(value == 1 for value in current)
        previous = current
