# pytest -v tests/test_processing.py --log-cli-level=DEBUG

import pytest

from rfcdoctool.models import ErrorCode
from rfcdoctool.processing import process_file
from rfcdoctool.utils.file_utils import read_file_content, write_file_atomic


class TestProcessFile:
    def test_returns_result_without_writing(self, rfc_file):
        path = rfc_file("1. A\n\n1. B")
        result = process_file(str(path), "numbering")
        assert result.success
        assert result.result == "1. A\n\n2. B"
        assert path.read_text() == "1. A\n\n1. B"

    def test_in_place_rewrites_file(self, rfc_file):
        path = rfc_file("1. A\n\n1. B")
        result = process_file(str(path), "numbering", in_place=True)
        assert result.success
        assert path.read_text() == "1. A\n\n2. B"
        assert [p.name for p in path.parent.iterdir()] == ["doc.rfc"]

    def test_failed_command_does_not_write(self, rfc_file):
        path = rfc_file("no sections", name="doc.rfc")
        result = process_file(str(path), "toc", in_place=True)
        assert not result.success
        assert path.read_text() == "no sections"

    def test_unknown_command(self, rfc_file):
        path = rfc_file("text")
        result = process_file(str(path), "nope")
        assert not result.success
        assert result.error.code == ErrorCode.INVALID_ARGUMENT
        assert "toc" in result.error.details

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            process_file(str(tmp_path / "missing.rfc"), "format")


class TestFileUtils:
    def test_latin1_fallback(self, tmp_path):
        path = tmp_path / "legacy.rfc"
        path.write_bytes("Caf\xe9".encode("latin-1"))
        assert read_file_content(str(path)) == "Caf\xe9"

    def test_line_endings_are_preserved(self, tmp_path):
        path = tmp_path / "crlf.rfc"
        path.write_bytes(b"a\r\nb")
        assert read_file_content(str(path)) == "a\r\nb"

    def test_atomic_write(self, tmp_path):
        path = tmp_path / "out.rfc"
        path.write_text("old")
        write_file_atomic(str(path), "new ✓")
        assert path.read_text(encoding="utf-8") == "new ✓"
        assert len(list(tmp_path.iterdir())) == 1
