import sys
from pathlib import Path

import pytest

# Ensure the project root and tests directories are on the Python path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))
tests_dir = Path(__file__).resolve().parent
sys.path.insert(0, str(tests_dir))


def pytest_configure(config):
    config.addinivalue_line("markers", "property: hypothesis property-based tests")


SAMPLE_DOCUMENT = """RFC TEST DOCUMENT
-----------------

Author  John Doe
Date    2024-01-01

INTRODUCTION

This is the introduction [3].

1. Main Section

Main text with a note [1].

1.1. Subsection

- bullet
- another

: Alternative Section

Closing words [2].

[3] Third footnote
[1] First footnote
[2] Second footnote"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def rfc_file(tmp_path):
    """Write ``content`` to ``name`` under tmp_path and return the path."""

    def _write(content: str, name: str = "doc.rfc") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
