"""Path token models: the navigation steps of a statement path."""

import json
import re
from dataclasses import dataclass
from typing import Tuple, Union

DEFAULT_ROOT_NAME = "json"

BARE_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_bare_identifier(name: str) -> bool:
    """Check whether a key can be rendered as a dotted segment."""
    return BARE_IDENTIFIER_RE.fullmatch(name) is not None


# Unpaired UTF-16 surrogates survive JSON decoding but cannot be written as UTF-8
SURROGATE_RE = re.compile("[\ud800-\udfff]")


def quote_string(text: str) -> str:
    """
    Quote a string with JSON escaping rules.

    Non-ASCII text is kept as is, except unpaired surrogates, which are
    written as ``\\uXXXX`` escapes so the result is always encodable.
    """
    quoted = json.dumps(text, ensure_ascii=False)
    return SURROGATE_RE.sub(lambda match: f"\\u{ord(match.group()):04x}", quoted)


@dataclass(frozen=True)
class RootToken:
    """The first token of every path, naming the top-level value."""

    name: str = DEFAULT_ROOT_NAME

    def render(self) -> str:
        return self.name

    def sort_key(self) -> Tuple:
        # Root tokens always compare equal to each other
        return (0,)


@dataclass(frozen=True)
class KeyToken:
    """A mapping field access."""

    name: str

    def render(self) -> str:
        if is_bare_identifier(self.name):
            return f".{self.name}"
        return f"[{quote_string(self.name)}]"

    def sort_key(self) -> Tuple:
        return (1, self.name)


@dataclass(frozen=True)
class IndexToken:
    """A list element access."""

    index: int

    def __post_init__(self):
        """Validate token after initialization."""
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise ValueError(f"index must be an int, got {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError("index must be non-negative")

    def render(self) -> str:
        return f"[{self.index}]"

    def sort_key(self) -> Tuple:
        return (2, self.index)


PathToken = Union[RootToken, KeyToken, IndexToken]


def render_path(path: Tuple[PathToken, ...]) -> str:
    """Render a sequence of path tokens as canonical text, e.g. ``json.a[2]``."""
    return "".join(token.render() for token in path)
