"""Main gron/ungron implementation."""

import logging
from typing import Any, Optional

from .colorizer import colorize_json, colorize_statement
from .encoder import encode_json
from .error_handler import ErrorHandler
from .flattener import Flattener
from .models import DEFAULT_ROOT_NAME, Statements
from .parser import JSONParser
from .statement_parser import StatementParser
from .tree_builder import TreeBuilder
from .types import (
    EncodingFailure,
    ErrorType,
    GronOptions,
    GronResult,
    GronTransformerInterface,
    StructuralConflict,
    UngronResult,
)
from .utils.validation import ValidationUtils


class GronTransformer(GronTransformerInterface):
    """
    Main implementation of the gron interface.

    Provides bidirectional conversion between JSON documents and flat,
    greppable assignment statements.
    """

    def __init__(self, root_name: str = DEFAULT_ROOT_NAME,
                 sort: bool = True,
                 monochrome: bool = True,
                 indent: int = 2,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the transformer.

        Args:
            root_name: Identifier used for the root of every statement path
            sort: Sort statements by path in the gron direction
            monochrome: Skip colour decoration of the output
            indent: Indentation width of ungron JSON output
            logger: Optional logger instance
        """
        self.root_name = root_name
        self.defaults = GronOptions(sort=sort, monochrome=monochrome)
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.flattener = Flattener(root_name, self.logger)
        self.statement_parser = StatementParser(root_name, self.logger)
        self.tree_builder = TreeBuilder(root_name, self.logger)

    def gron(self, json_string: str, options: Optional[GronOptions] = None) -> GronResult:
        """
        Turn a JSON document into assignment statements.

        Args:
            json_string: Input JSON text
            options: Per-run flags (defaults to the constructor settings)

        Returns:
            GronResult with one statement per output line
        """
        options = options or self.defaults

        try:
            data = self.parser.parse(json_string)
        except ValueError as e:
            self.logger.error(f"Failed to form statements: {e}")
            return GronResult(
                success=False,
                output="",
                errors=[f"failed to form statements: {e}"],
                error_type=ErrorType.FORM_STATEMENTS
            )

        try:
            statements = self.make_statements(data, sort=options.sort)
        except RecursionError:
            self.logger.error("Failed to form statements: document nested too deeply")
            return GronResult(
                success=False,
                output="",
                errors=["failed to form statements: document nested too deeply"],
                error_type=ErrorType.FORM_STATEMENTS
            )

        if options.monochrome:
            lines = statements.render_lines()
        else:
            lines = [colorize_statement(statement) for statement in statements]

        self.logger.info(f"Formed {len(statements)} statements (sorted={options.sort})")
        return GronResult(
            success=True,
            output="".join(line + "\n" for line in lines),
            statement_count=len(statements)
        )

    def make_statements(self, data: Any, sort: bool = True) -> Statements:
        """
        Flatten a decoded value, optionally sorting the statements.

        Args:
            data: Decoded JSON value
            sort: Sort by path; when False the pre-order of the walk is kept

        Returns:
            Statements ready for rendering
        """
        statements = self.flattener.flatten(data)
        if sort:
            statements.sort()
        return statements

    def ungron(self, statements_text: str, options: Optional[GronOptions] = None) -> UngronResult:
        """
        Turn assignment statements back into a JSON document.

        Every line is parsed before any error is reported, so all malformed
        lines are listed together. A structural conflict found while
        merging stops the run and names the offending path.

        Args:
            statements_text: Newline separated statements
            options: Per-run flags; only ``monochrome`` applies here

        Returns:
            UngronResult with the indented JSON text and the merged value
        """
        options = options or self.defaults

        validation = ValidationUtils.validate_statements_text(statements_text)
        for warning in validation.warnings:
            self.logger.warning(warning)

        statements, failures = self.statement_parser.parse_lines(statements_text.split("\n"))
        if failures:
            return UngronResult(
                success=False,
                json_string="",
                statement_count=len(statements),
                errors=self.error_handler.summarize_parse_failures(failures),
                error_type=ErrorType.PARSE_STATEMENTS
            )

        try:
            merged = self.tree_builder.unwrap_root(self.tree_builder.merge(statements))
        except StructuralConflict as e:
            response = self.error_handler.handle_error(e)
            return UngronResult(
                success=False,
                json_string="",
                statement_count=len(statements),
                errors=[response.message, response.suggested_action],
                error_type=e.error_type
            )

        try:
            json_string = self.encode(merged, monochrome=options.monochrome)
        except EncodingFailure as e:
            response = self.error_handler.handle_error(e)
            return UngronResult(
                success=False,
                json_string="",
                value=merged,
                statement_count=len(statements),
                errors=[response.message, response.suggested_action],
                error_type=e.error_type
            )

        self.logger.info(f"Merged {len(statements)} statements into JSON")
        return UngronResult(
            success=True,
            json_string=json_string,
            value=merged,
            statement_count=len(statements)
        )

    def encode(self, value: Any, monochrome: bool = True) -> str:
        """
        Serialise a merged value as indented JSON.

        Raises:
            EncodingFailure: If the value cannot be represented as JSON
        """
        if monochrome:
            return encode_json(value, self.indent)
        return colorize_json(value, self.indent)
