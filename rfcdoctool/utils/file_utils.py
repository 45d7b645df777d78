import logging
import os
import tempfile
from typing import Optional

from rfcdoctool.config.document_config import DEFAULT_CONFIG, DocumentConfig

logger = logging.getLogger(__name__)


def read_file_content(file_path: str) -> str:
    """Read file content with fallback encoding."""
    logger.info(f"Reading file: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        logger.warning("UTF-8 decode failed, trying with different encoding")
        with open(file_path, "r", encoding="latin-1", newline="") as f:
            return f.read()


def is_supported_file(file_path: str, config: Optional[DocumentConfig] = None) -> bool:
    """Return True when ``file_path`` has one of the configured extensions."""
    config = config or DEFAULT_CONFIG
    _, ext = os.path.splitext(file_path)
    return ext.lower() in config.file_extensions


def write_file_atomic(file_path: str, content: str) -> None:
    """Write ``content`` to a temporary file beside ``file_path`` and swap it in."""
    directory = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(prefix=".rfcdoctool-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_path, file_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    logger.info(f"Wrote {len(content)} characters to {file_path}")
