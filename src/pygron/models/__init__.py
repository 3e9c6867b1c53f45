"""Statement and path token models."""

from .path_token import (
    DEFAULT_ROOT_NAME,
    IndexToken,
    KeyToken,
    PathToken,
    RootToken,
    is_bare_identifier,
    render_path,
)
from .statement import Statement, StatementKind, Statements, compare, render_scalar

__all__ = [
    "DEFAULT_ROOT_NAME",
    "IndexToken",
    "KeyToken",
    "PathToken",
    "RootToken",
    "Statement",
    "StatementKind",
    "Statements",
    "compare",
    "is_bare_identifier",
    "render_path",
    "render_scalar",
]
