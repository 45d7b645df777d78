from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class RFCDocError(Exception):
    """Base exception for document processing errors."""

    pass


class ConfigurationError(RFCDocError):
    """Exception for configuration-related errors."""

    pass


class Severity(IntEnum):
    """Enum for diagnostic severity levels."""

    ERROR = 0
    WARNING = 1
    INFO = 2

    @property
    def value_str(self) -> str:
        return ["error", "warning", "info"][self]


class ErrorCode(str, Enum):
    """Error codes carried by failed command results."""

    FILE_TYPE_UNSUPPORTED = "file_type_unsupported"
    PROCESSING_ERROR = "processing_error"
    NO_SECTIONS_FOUND = "no_sections_found"
    INVALID_ARGUMENT = "invalid_argument"

    def __str__(self) -> str:
        return self.value


class NumberingStyle(str, Enum):
    """Numbering styles a counter frame can render."""

    NUMERIC = "numeric"
    LETTERED = "lettered"
    ROMAN = "roman"
    SECTION_DOTTED = "section_dotted"


class LineKind(str, Enum):
    """Structural role of a single document line."""

    TITLE = "title"
    UNDERLINE = "underline"
    TOC = "toc"
    SECTION = "section"
    METADATA = "metadata"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    QUOTE = "quote"
    FOOTNOTE = "footnote"
    BLANK = "blank"
    TEXT = "text"


@dataclass(frozen=True)
class Section:
    """A heading line recovered from document text."""

    name: str
    level: int
    line: int
    prefix: str

    @property
    def is_numbered(self) -> bool:
        return self.prefix not in ("", ":")

    @property
    def numeral(self) -> str:
        """Dotted numeral without the trailing dot, e.g. ``"2.1"``."""
        return self.prefix.rstrip(".") if self.is_numbered else ""


@dataclass(frozen=True)
class ListItem:
    """A bullet or ordered list line, split into its parts."""

    indent: str
    marker: str
    rest: str
    ordered: bool

    @property
    def indent_width(self) -> int:
        return len(self.indent.expandtabs(4))


@dataclass(frozen=True)
class ClassifiedLine:
    """A document line tagged with its structural kind."""

    index: int
    text: str
    kind: LineKind
    section: Optional[Section] = None
    list_item: Optional[ListItem] = None


@dataclass(frozen=True)
class TOCLocation:
    """Inclusive line range of a table of contents block."""

    start_line: int
    end_line: int


@dataclass
class CounterFrame:
    """One level of a renumbering stack."""

    depth: int
    style: NumberingStyle
    value: int = 1

    def advance(self) -> int:
        self.value += 1
        return self.value


@dataclass(frozen=True)
class FootnoteDeclaration:
    """A ``[n] text`` line declaring a footnote."""

    original_number: str
    text: str
    position: int


@dataclass(frozen=True)
class FootnoteReference:
    """An in-text ``[n]`` token pointing at a footnote."""

    original_number: str
    position: int


class Position(BaseModel):
    """Zero-based line/character position."""

    line: int = 0
    character: int = 0


class Range(BaseModel):
    """A span between two positions."""

    start: Position = Field(default_factory=Position)
    end: Position = Field(default_factory=Position)


class DocumentReference(BaseModel):
    """A ``see: path#anchor`` occurrence."""

    file_path: str
    anchor: str = ""
    range: Range = Field(default_factory=Range)


class Diagnostic(BaseModel):
    """A problem attached to a range of the checked document."""

    message: str
    range: Range = Field(default_factory=Range)
    severity: Severity = Severity.ERROR

    def format(self, file_path: str = "") -> str:
        """Render as ``file:line:col: severity: message`` with 1-based positions."""
        location = f"{self.range.start.line + 1}:{self.range.start.character + 1}"
        prefix = f"{file_path}:{location}" if file_path else location
        return f"{prefix}: {self.severity.value_str}: {self.message}"


class ErrorInfo(BaseModel):
    """Standard error information structure."""

    code: ErrorCode
    message: str
    details: Optional[str] = None


class FootnoteProcessResult(BaseModel):
    success: bool
    new_text: Optional[str] = None
    error: Optional[str] = None


class NumberingFixResult(BaseModel):
    success: bool
    fixed_text: Optional[str] = None
    lines_changed: int = 0
    error: Optional[str] = None


class ReferenceCheckResult(BaseModel):
    success: bool
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    references_found: int = 0

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)


class CommandResult(BaseModel):
    """Uniform result of a command run against a document."""

    success: bool
    result: Optional[str] = None
    error: Optional[ErrorInfo] = None
    lines_changed: Optional[int] = None
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    references_found: Optional[int] = None

    @classmethod
    def ok(cls, result: Optional[str] = None, **kwargs) -> "CommandResult":
        return cls(success=True, result=result, **kwargs)

    @classmethod
    def failure(
        cls, code: ErrorCode, message: str, details: Optional[str] = None, **kwargs
    ) -> "CommandResult":
        return cls(
            success=False, error=ErrorInfo(code=code, message=message, details=details), **kwargs
        )

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""
