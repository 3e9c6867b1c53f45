"""Statement model: one path plus one terminal value declaration."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from ..value_model import ValueKind, detect_value_kind, number_literal
from .path_token import PathToken, RootToken, quote_string, render_path


class StatementKind(Enum):
    """What a statement assigns to its path."""
    EMPTY_OBJECT = "{}"
    EMPTY_ARRAY = "[]"
    SCALAR = "scalar"


# Tie-break order for statements that share a path
_KIND_RANK = {
    StatementKind.EMPTY_OBJECT: 0,
    StatementKind.EMPTY_ARRAY: 1,
    StatementKind.SCALAR: 2,
}


def render_scalar(value: Any) -> str:
    """
    Render a scalar as its JSON literal.

    Args:
        value: None, bool, int, float or str

    Returns:
        JSON literal text

    Raises:
        ValueError: If the value is a container or not finite
    """
    kind = detect_value_kind(value)
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOL:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        return number_literal(value)
    if kind == ValueKind.STRING:
        return quote_string(value)
    raise ValueError(f"Expected a scalar value, got {kind.value}")


@dataclass(frozen=True)
class Statement:
    """
    A single assignment such as ``json.users[0].name = "Alice";``.

    Statements with an empty-container kind declare that a container exists
    without declaring its contents; scalar statements carry a leaf value.
    """

    path: Tuple[PathToken, ...]
    kind: StatementKind
    value: Any = None

    def __post_init__(self):
        """Validate statement after initialization."""
        if not self.path or not isinstance(self.path[0], RootToken):
            raise ValueError("path must start with a RootToken")
        if any(isinstance(token, RootToken) for token in self.path[1:]):
            raise ValueError("RootToken may only appear first in a path")
        if self.kind != StatementKind.SCALAR and self.value is not None:
            raise ValueError("empty-container statements carry no value")

    @classmethod
    def scalar(cls, path: Iterable[PathToken], value: Any) -> 'Statement':
        return cls(tuple(path), StatementKind.SCALAR, value)

    @classmethod
    def empty_object(cls, path: Iterable[PathToken]) -> 'Statement':
        return cls(tuple(path), StatementKind.EMPTY_OBJECT)

    @classmethod
    def empty_array(cls, path: Iterable[PathToken]) -> 'Statement':
        return cls(tuple(path), StatementKind.EMPTY_ARRAY)

    @property
    def root(self) -> RootToken:
        return self.path[0]

    def path_text(self) -> str:
        return render_path(self.path)

    def value_text(self) -> str:
        if self.kind == StatementKind.SCALAR:
            return render_scalar(self.value)
        return self.kind.value

    def render(self) -> str:
        """Render the statement in its canonical wire format."""
        return f"{self.path_text()} = {self.value_text()};"

    def sort_key(self) -> Tuple:
        """
        Key giving the total order of statements.

        Paths compare token by token (keys before indices, a prefix before
        its extensions), then by statement kind, then by value text.
        """
        return (
            tuple(token.sort_key() for token in self.path),
            _KIND_RANK[self.kind],
            self.value_text() if self.kind == StatementKind.SCALAR else "",
        )

    def __str__(self) -> str:
        return self.render()


def compare(a: Statement, b: Statement) -> int:
    """Three-way comparison of two statements: -1, 0 or 1."""
    key_a, key_b = a.sort_key(), b.sort_key()
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


class Statements(list):
    """An ordered collection of statements."""

    def add(self, statement: Statement) -> None:
        self.append(statement)

    def sort(self, *, reverse: bool = False) -> None:
        super().sort(key=Statement.sort_key, reverse=reverse)

    def sorted(self) -> 'Statements':
        """Return a sorted copy, leaving this collection untouched."""
        copy = Statements(self)
        copy.sort()
        return copy

    def render_lines(self) -> List[str]:
        return [statement.render() for statement in self]

    def to_value(self, root_name: Optional[str] = None) -> Any:
        """Merge the statements, in collection order, into a single value."""
        from ..tree_builder import TreeBuilder
        return TreeBuilder(root_name=root_name).merge(self)
