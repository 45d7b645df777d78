# pytest -v tests/test_commands.py --log-cli-level=DEBUG

import pytest

from rfcdoctool.commands import (
    CommandRegistry,
    check_references_command,
    fix_numbering_command,
    format_document_command,
    full_formatting_command,
    generate_toc_command,
    process_footnotes_command,
)
from rfcdoctool.config.document_config import DocumentConfig
from rfcdoctool.models import ErrorCode


class TestCommandRegistry:
    def test_all_commands_registered(self):
        assert CommandRegistry.names() == [
            "footnotes",
            "format",
            "full",
            "numbering",
            "references",
            "toc",
        ]

    def test_lookup(self):
        assert CommandRegistry.get("toc") is generate_toc_command
        assert CommandRegistry.get("missing") is None


class TestFileTypeGating:
    @pytest.mark.parametrize(
        "command,label",
        [
            (format_document_command, "Format Document"),
            (generate_toc_command, "Generate TOC"),
            (process_footnotes_command, "Number Footnotes"),
            (fix_numbering_command, "Fix Numbering"),
            (check_references_command, "Check References"),
            (full_formatting_command, "Full Formatting"),
        ],
    )
    def test_non_rfc_file_is_rejected(self, command, label):
        result = command("1. Intro", "notes.txt")
        assert not result.success
        assert result.error.code == ErrorCode.FILE_TYPE_UNSUPPORTED
        assert result.error_message == f"{label} command is only available for .rfc files"

    def test_extension_check_is_case_insensitive(self):
        assert format_document_command("text", "DOC.RFC").success

    def test_configured_extensions(self):
        config = DocumentConfig(file_extensions=[".txt"])
        assert format_document_command("text", "notes.txt", config).success
        result = format_document_command("text", "doc.rfc", config)
        assert result.error_message == "Format Document command is only available for .txt files"


class TestCommandResults:
    def test_format_command(self):
        result = format_document_command("Author  Jane", "doc.rfc")
        assert result.success
        assert result.result == "Author        Jane"
        assert result.error is None

    def test_toc_command_requires_sections(self):
        result = generate_toc_command("no sections here", "doc.rfc")
        assert not result.success
        assert result.error.code == ErrorCode.NO_SECTIONS_FOUND
        assert result.error_message == "No sections found to generate TOC"

    def test_toc_command(self):
        result = generate_toc_command("1. Intro\n\nBody", "doc.rfc")
        assert result.success
        assert "TABLE OF CONTENTS" in result.result

    def test_footnotes_command(self):
        result = process_footnotes_command("A [2]\n\n[2] Note", "doc.rfc")
        assert result.success
        assert result.result == "A [1]\n\n[1] Note"

    def test_numbering_command(self):
        result = fix_numbering_command("1. A\n\n1. B", "doc.rfc")
        assert result.success
        assert result.result == "1. A\n\n2. B"
        assert result.lines_changed == 1

    def test_numbering_command_failure(self):
        result = fix_numbering_command(None, "doc.rfc")
        assert not result.success
        assert result.error.code == ErrorCode.PROCESSING_ERROR
        assert result.lines_changed == 0

    def test_references_command(self, rfc_file):
        path = rfc_file("see: missing.rfc\nsee: doc.rfc")
        result = check_references_command(path.read_text(), str(path))
        assert result.success
        assert result.references_found == 2
        assert len(result.diagnostics) == 1

    def test_full_command(self, sample_document):
        result = full_formatting_command(sample_document, "doc.rfc")
        assert result.success
        assert "TABLE OF CONTENTS" in result.result

    def test_internal_error_becomes_processing_error(self, monkeypatch):
        from rfcdoctool import commands

        def boom(text, config=None):
            raise RuntimeError("kaput")

        monkeypatch.setattr(commands, "format_document", boom)
        result = format_document_command("text", "doc.rfc")
        assert not result.success
        assert result.error.code == ErrorCode.PROCESSING_ERROR
        assert result.error_message == "Error formatting document: kaput"
