"""Configuration settings for document transforms."""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from rfcdoctool.models import ConfigurationError, NumberingStyle

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RFCDOCTOOL_CONFIG"


class DocumentConfig(BaseModel):
    """Settings shared by the scanner, the formatters and the command layer."""

    file_extensions: List[str] = Field(default_factory=lambda: [".rfc"])
    toc_header: str = "TABLE OF CONTENTS"
    toc_indent: str = "    "
    metadata_key_width: int = Field(default=14, gt=0)
    list_indent_width: int = Field(default=4, gt=0)
    list_styles: List[NumberingStyle] = Field(
        default_factory=lambda: [NumberingStyle.NUMERIC, NumberingStyle.LETTERED]
    )

    @field_validator("file_extensions")
    @classmethod
    def _check_extensions(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one file extension is required")
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"file extension must start with '.': {ext}")
        return [ext.lower() for ext in value]

    @field_validator("toc_header")
    @classmethod
    def _check_header(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("toc_header must not be blank")
        return value.strip()

    @field_validator("list_styles")
    @classmethod
    def _check_list_styles(cls, value: List[NumberingStyle]) -> List[NumberingStyle]:
        if not value:
            raise ValueError("list_styles must not be empty")
        if NumberingStyle.SECTION_DOTTED in value:
            raise ValueError("section_dotted is reserved for section numbering")
        return value

    @property
    def toc_underline(self) -> str:
        return "-" * len(self.toc_header)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentConfig":
        """Create a config from a dictionary, rejecting invalid values."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "DocumentConfig":
        """Create a config from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a JSON object")
        return cls.from_dict(data)


DEFAULT_CONFIG = DocumentConfig()


def load_config(path: Optional[str] = None) -> DocumentConfig:
    """Load configuration from ``path`` or the ``RFCDOCTOOL_CONFIG`` variable.

    Returns the defaults when neither is set.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return DEFAULT_CONFIG

    logger.info(f"Loading configuration from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to load configuration from {path}: {e}") from e
    return DocumentConfig.from_json(content)
