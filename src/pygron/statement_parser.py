"""Statement parser: turns one line of text back into a Statement."""

import json
import logging
import re
from json.decoder import scanstring
from typing import Any, Iterable, List, Optional, Tuple

from .models import (
    DEFAULT_ROOT_NAME,
    IndexToken,
    KeyToken,
    PathToken,
    RootToken,
    Statement,
    StatementKind,
    Statements,
)
from .models.path_token import BARE_IDENTIFIER_RE
from .types import MalformedStatement
from .value_model import JSONNumber

NUMBER_RE = re.compile(r'-?(?:0|[1-9]\d*)(\.\d+)?([eE][-+]?\d+)?')
INDEX_RE = re.compile(r'0|[1-9]\d*')
WHITESPACE_RE = re.compile(r'[ \t\n\r]*')

LITERALS = {
    'true': True,
    'false': False,
    'null': None,
}


class StatementLexer:
    """
    Cursor over a single statement line.

    Each ``read_*`` method consumes one lexical element at the current
    position and raises MalformedStatement when the text there does not
    match.
    """

    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    def error(self, reason: str) -> MalformedStatement:
        return MalformedStatement(self.line, f"{reason} at column {self.pos + 1}")

    def peek(self) -> str:
        return self.line[self.pos:self.pos + 1]

    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    def skip_whitespace(self) -> None:
        self.pos = WHITESPACE_RE.match(self.line, self.pos).end()

    def accept(self, text: str) -> bool:
        """Consume ``text`` if it is next in the line."""
        if self.line.startswith(text, self.pos):
            self.pos += len(text)
            return True
        return False

    def expect(self, text: str) -> None:
        if not self.accept(text):
            raise self.error(f"expected {text!r}")

    def read_identifier(self) -> str:
        match = BARE_IDENTIFIER_RE.match(self.line, self.pos)
        if not match:
            raise self.error("expected an identifier")
        self.pos = match.end()
        return match.group()

    def read_index(self) -> int:
        match = INDEX_RE.match(self.line, self.pos)
        if not match:
            raise self.error("expected an array index")
        self.pos = match.end()
        return int(match.group())

    def read_string(self) -> str:
        if self.peek() != '"':
            raise self.error("expected a quoted string")
        try:
            text, end = scanstring(self.line, self.pos + 1, True)
        except json.JSONDecodeError as e:
            raise self.error(f"invalid string ({e.msg})")
        self.pos = end
        return text

    def read_number(self) -> Any:
        match = NUMBER_RE.match(self.line, self.pos)
        if not match:
            raise self.error("expected a number")
        literal = match.group()
        fraction, exponent = match.group(1), match.group(2)
        try:
            if fraction or exponent:
                number = JSONNumber(literal)
            else:
                number = int(literal)
        except ValueError:
            raise self.error("number out of range")
        self.pos = match.end()
        return number

    def read_literal(self) -> Any:
        for word, value in LITERALS.items():
            if self.accept(word):
                return value
        raise self.error("expected a value")


class StatementParser:
    """
    Parser for the canonical statement line format.

    Grammar::

        statement := path WS* '=' WS* value WS* ';'? WS*
        path      := root-ident segment*
        segment   := '.' bare-ident | '[' (index | json-string) ']'
        value     := json-scalar | '{}' | '[]'
    """

    def __init__(self, root_name: str = DEFAULT_ROOT_NAME,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the statement parser.

        Args:
            root_name: Identifier every statement path must start with
            logger: Optional logger instance
        """
        self.root_name = root_name
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, line: str) -> Statement:
        """
        Parse one line into a Statement.

        Args:
            line: Statement text, optionally with surrounding whitespace
                and a trailing semicolon

        Returns:
            The parsed Statement

        Raises:
            MalformedStatement: If the line does not match the grammar
        """
        lexer = StatementLexer(line)
        lexer.skip_whitespace()

        path = self._parse_path(lexer)

        lexer.skip_whitespace()
        lexer.expect("=")
        lexer.skip_whitespace()

        kind, value = self._parse_value(lexer)

        lexer.skip_whitespace()
        lexer.accept(";")
        lexer.skip_whitespace()
        if not lexer.at_end():
            raise lexer.error("unexpected trailing text")

        return Statement(tuple(path), kind, value)

    def parse_lines(self, lines: Iterable[str]) -> Tuple[Statements, List[MalformedStatement]]:
        """
        Parse every line, collecting failures instead of stopping at the first.

        Blank lines are skipped. Line numbers in the returned errors are
        1-based positions in the input.

        Args:
            lines: Lines of statement text

        Returns:
            Tuple of (statements in input order, malformed line errors)
        """
        statements = Statements()
        errors: List[MalformedStatement] = []

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                statements.add(self.parse(line))
            except MalformedStatement as e:
                errors.append(MalformedStatement(e.line.rstrip("\r\n"), e.reason, line_number))

        self.logger.debug(f"Parsed {len(statements)} statements, {len(errors)} malformed lines")
        return statements, errors

    def _parse_path(self, lexer: StatementLexer) -> List[PathToken]:
        root = lexer.read_identifier()
        if root != self.root_name:
            raise MalformedStatement(lexer.line, f"path must start with {self.root_name!r}, found {root!r}")

        path: List[PathToken] = [RootToken(self.root_name)]
        while True:
            if lexer.accept("."):
                path.append(KeyToken(lexer.read_identifier()))
            elif lexer.accept("["):
                if lexer.peek() == '"':
                    path.append(KeyToken(lexer.read_string()))
                else:
                    path.append(IndexToken(lexer.read_index()))
                lexer.expect("]")
            else:
                return path

    def _parse_value(self, lexer: StatementLexer) -> Tuple[StatementKind, Any]:
        # Only the two-character markers are accepted for containers
        if lexer.accept("{}"):
            return StatementKind.EMPTY_OBJECT, None
        if lexer.accept("[]"):
            return StatementKind.EMPTY_ARRAY, None

        char = lexer.peek()
        if char == '"':
            return StatementKind.SCALAR, lexer.read_string()
        if char == "-" or char.isdigit():
            return StatementKind.SCALAR, lexer.read_number()
        return StatementKind.SCALAR, lexer.read_literal()


def parse_statement(line: str, root_name: str = DEFAULT_ROOT_NAME) -> Statement:
    """Parse a single line with a default-configured StatementParser."""
    return StatementParser(root_name).parse(line)
