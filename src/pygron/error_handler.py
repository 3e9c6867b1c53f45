"""Error handling implementation for pygron."""

import logging
from typing import List, Optional, Sequence

from .types import (
    EncodingFailure,
    ErrorHandlerInterface,
    ErrorResponse,
    ErrorType,
    ExitCode,
    GronError,
    MalformedStatement,
    StructuralConflict,
    ValidationError,
    ValidationResult,
)
from .utils.validation import ValidationUtils

_EXIT_CODES = {
    ErrorType.OPEN_FILE: ExitCode.OPEN_FILE,
    ErrorType.READ_INPUT: ExitCode.READ_INPUT,
    ErrorType.FORM_STATEMENTS: ExitCode.FORM_STATEMENTS,
    ErrorType.FETCH_URL: ExitCode.FETCH_URL,
    ErrorType.PARSE_STATEMENTS: ExitCode.PARSE_STATEMENTS,
    ErrorType.JSON_ENCODE: ExitCode.JSON_ENCODE,
}

_EXIT_DESCRIPTIONS = {
    ExitCode.OK: "OK",
    ExitCode.OPEN_FILE: "Failed to open file",
    ExitCode.READ_INPUT: "Failed to read input",
    ExitCode.FORM_STATEMENTS: "Failed to form statements",
    ExitCode.FETCH_URL: "Failed to fetch URL",
    ExitCode.PARSE_STATEMENTS: "Failed to parse statements",
    ExitCode.JSON_ENCODE: "Failed to encode JSON",
}


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for gron and ungron runs.

    Validates raw input, maps failure categories onto process exit codes
    and turns errors into messages that point at the offending line or path.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except RecursionError as e:
            self.logger.error(f"Input nested too deeply to validate: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.FORM_STATEMENTS,
                    message="JSON input is nested too deeply",
                    location="input"
                )],
                warnings=[]
            )

    @staticmethod
    def exit_code_for(error_type: Optional[ErrorType]) -> ExitCode:
        """Map a failure category onto its process exit code."""
        if error_type is None:
            return ExitCode.OK
        return _EXIT_CODES[error_type]

    @staticmethod
    def describe_exit_codes() -> List[str]:
        """Describe every exit code, one line each, for help output."""
        return [f"{int(code)}\t{description}" for code, description in _EXIT_DESCRIPTIONS.items()]

    def summarize_parse_failures(self, errors: Sequence[MalformedStatement]) -> List[str]:
        """
        Build one message per malformed line so all of them can be fixed at once.

        Args:
            errors: Errors collected while parsing statement lines

        Returns:
            Messages naming the line number, the reason and the line text
        """
        for error in errors:
            self.logger.error(f"Malformed statement: {error}")
        return [str(error) for error in errors]

    def handle_error(self, error: GronError) -> ErrorResponse:
        """
        Turn an error into a user-facing response.

        Args:
            error: GronError to handle

        Returns:
            ErrorResponse with exit code, message and suggested action
        """
        self.logger.error(f"{error.error_type.value}: {error}")
        exit_code = self.exit_code_for(error.error_type)

        if isinstance(error, MalformedStatement):
            action = "Fix the reported line so it reads like: json.path[0] = \"value\";"
        elif isinstance(error, StructuralConflict):
            action = (f"Statements disagree about the value at {error.path}. "
                      "Remove or correct one of them.")
        elif isinstance(error, EncodingFailure):
            action = "The merged value could not be serialised; please report this as a bug."
        elif error.error_type == ErrorType.FETCH_URL:
            action = "Check the URL and your network connection."
        elif error.error_type == ErrorType.OPEN_FILE:
            action = "Check that the file exists and is readable."
        else:
            action = "Check the input and retry."

        return ErrorResponse(
            exit_code=exit_code,
            message=f"{_EXIT_DESCRIPTIONS[exit_code].lower()}: {error}",
            suggested_action=action
        )
