import logging
import logging.config
import sys
from io import TextIOWrapper
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _ensure_utf8(stream: TextIOWrapper) -> TextIOWrapper:
    """Return a text stream guaranteed to use UTF-8 encoding."""
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    if encoding == "utf8":
        return stream
    if hasattr(stream, "reconfigure"):
        try:  # pragma: no cover - platform dependent
            stream.reconfigure(encoding="utf-8", errors="replace")
            return stream
        except Exception:
            pass
    if not hasattr(stream, "buffer"):
        # pytest capture streams and StringIO have no byte buffer
        return stream
    return TextIOWrapper(stream.buffer, encoding="utf-8", errors="replace")


def build_logging_config(debug: bool = False, log_file: Optional[str] = None) -> Dict[str, Any]:
    """Build a ``dictConfig`` mapping.

    The console handler writes to stderr so transformed documents printed to
    stdout stay clean.
    """
    level = "DEBUG" if debug else "INFO"
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "level": level,
            "formatter": "default",
            "filename": log_file,
            "mode": "w",
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEBUG_LOG_FORMAT if debug else LOG_FORMAT},
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": level,
        },
    }


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        debug (bool): If True, use DEBUG level logging. If False, use INFO level.
        log_file (str): Optional path of a log file written alongside the console.
    """
    for stream_name in ("stdout", "stderr"):
        stream = getattr(sys, stream_name)
        setattr(sys, stream_name, _ensure_utf8(stream))

    logging.config.dictConfig(build_logging_config(debug, log_file))
