"""Core type definitions for pygron."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class ErrorType(Enum):
    """Enumeration of failure categories surfaced to the caller."""
    OPEN_FILE = "open_file"
    READ_INPUT = "read_input"
    FORM_STATEMENTS = "form_statements"
    FETCH_URL = "fetch_url"
    PARSE_STATEMENTS = "parse_statements"
    JSON_ENCODE = "json_encode"


class ExitCode(IntEnum):
    """Process exit codes of the gron command."""
    OK = 0
    OPEN_FILE = 1
    READ_INPUT = 2
    FORM_STATEMENTS = 3
    FETCH_URL = 4
    PARSE_STATEMENTS = 5
    JSON_ENCODE = 6


@dataclass
class GronOptions:
    """Per-run flags for the gron and ungron actions."""
    sort: bool = True
    monochrome: bool = True


@dataclass
class GronResult:
    """Result of a gron (JSON to statements) operation."""
    success: bool
    output: str
    statement_count: int = 0
    errors: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None


@dataclass
class UngronResult:
    """Result of an ungron (statements to JSON) operation."""
    success: bool
    json_string: str
    value: Any = None
    statement_count: int = 0
    errors: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str] = field(default_factory=list)


@dataclass
class ErrorResponse:
    """Response for error handling."""
    exit_code: ExitCode
    message: str
    suggested_action: str


class GronError(Exception):
    """Base exception for every failure raised by pygron."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class InputError(GronError):
    """Raised when the input document or statements cannot be acquired."""


class MalformedStatement(GronError):
    """Raised when one line of text does not match the statement grammar."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(
            f"{location}{reason}: {line!r}",
            ErrorType.PARSE_STATEMENTS,
            context={"line": line, "line_number": line_number, "reason": reason}
        )
        self.line = line
        self.reason = reason
        self.line_number = line_number


class StructuralConflict(GronError):
    """Raised when two statements need incompatible node kinds at one path."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(
            message or f"conflicting container kinds at {path}",
            ErrorType.PARSE_STATEMENTS,
            context={"path": path}
        )
        self.path = path


class TypeMismatch(StructuralConflict):
    """Raised when a path token is applied to a node of the wrong kind."""


class TypeMismatchOnIndex(TypeMismatch):
    """An index token was applied to a node that is not a list."""

    def __init__(self, path: str, index: int, found: str):
        super().__init__(path, f"cannot apply index [{index}] to {found} at {path}")
        self.index = index
        self.found = found


class TypeMismatchOnKey(TypeMismatch):
    """A key token was applied to a node that is not a mapping."""

    def __init__(self, path: str, key: str, found: str):
        super().__init__(path, f"cannot apply key {key!r} to {found} at {path}")
        self.key = key
        self.found = found


class EncodingFailure(GronError):
    """Raised when the merged value cannot be serialised as JSON."""

    def __init__(self, message: str):
        super().__init__(message, ErrorType.JSON_ENCODE)


# Abstract base classes for interfaces

class GronTransformerInterface(ABC):
    """Abstract interface for the gron/ungron actions."""

    @abstractmethod
    def gron(self, json_string: str, options: Optional[GronOptions] = None) -> GronResult:
        """Turn a JSON document into greppable assignment statements."""
        pass

    @abstractmethod
    def ungron(self, statements_text: str, options: Optional[GronOptions] = None) -> UngronResult:
        """Turn assignment statements back into a JSON document."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate raw JSON input."""
        pass

    @abstractmethod
    def handle_error(self, error: GronError) -> ErrorResponse:
        """Turn an error into a user-facing response."""
        pass
