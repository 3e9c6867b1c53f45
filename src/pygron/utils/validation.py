"""Validation utilities for raw input text."""

import json
from typing import Any, List

from ..types import ErrorType, ValidationError, ValidationResult
from ..value_model import JSONNumber, reject_constant


class ValidationUtils:
    """Utility class for validating input documents."""

    @staticmethod
    def decode_json(json_string: str) -> Any:
        """
        Decode JSON the way a conforming decoder would.

        NaN and Infinity are rejected. Non-integer numbers decode to
        JSONNumber so their source text survives.

        Raises:
            json.JSONDecodeError: On syntax errors
            ValueError: On NaN/Infinity constants or oversized integers
        """
        return json.loads(
            json_string,
            parse_float=JSONNumber,
            parse_constant=reject_constant,
        )

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.FORM_STATEMENTS,
                message="JSON input is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = ValidationUtils.decode_json(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.FORM_STATEMENTS,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.FORM_STATEMENTS,
                message=f"Invalid JSON value: {e}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        max_depth = ValidationUtils.calculate_max_depth(data)
        if max_depth > 100:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). Paths will be very long.")

        return ValidationResult(is_valid=True, errors=errors, warnings=warnings)

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            max_child_depth = max(
                max_child_depth,
                ValidationUtils.calculate_max_depth(child, current_depth + 1)
            )
        return max_child_depth

    @staticmethod
    def validate_statements_text(text: str) -> ValidationResult:
        """
        Check statement input for problems that are not per-line errors.

        Args:
            text: Newline separated statement text

        Returns:
            ValidationResult; an input without any statement only warns
        """
        warnings: List[str] = []
        if not text.strip():
            warnings.append("No statements in input; the result will be null")
        return ValidationResult(is_valid=True, errors=[], warnings=warnings)
