"""JSON parser for the forward (gron) direction."""

import json
import logging
from typing import Any, Optional

from .error_handler import ErrorHandler
from .utils.validation import ValidationUtils
from .value_model import detect_value_kind


class JSONParser:
    """
    JSON parser with validation.

    Decodes raw input into the value model consumed by the Flattener and
    reports every problem with its location.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON string.

        Args:
            json_string: JSON string to parse

        Returns:
            Decoded value (any of the six JSON kinds, including scalars)

        Raises:
            ValueError: If JSON is invalid
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [
                f"{error.message} ({error.location})" if error.location else error.message
                for error in validation_result.errors
            ]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        try:
            data = ValidationUtils.decode_json(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")

        self.logger.info(f"Parsed JSON with root kind: {detect_value_kind(data).value}")
        return data
