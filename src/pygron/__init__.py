"""
pygron - Make JSON greppable.

Flattens JSON into discrete path assignments and reassembles JSON from
(possibly filtered) assignments.
"""

__version__ = "1.0.0"

from .encoder import encode_json
from .flattener import Flattener, flatten
from .gron_transformer import GronTransformer
from .models import IndexToken, KeyToken, RootToken, Statement, StatementKind, Statements, compare
from .statement_parser import StatementParser, parse_statement
from .tree_builder import TreeBuilder, merge
from .types import (
    EncodingFailure,
    ErrorType,
    ExitCode,
    GronError,
    GronOptions,
    GronResult,
    MalformedStatement,
    StructuralConflict,
    TypeMismatch,
    TypeMismatchOnIndex,
    TypeMismatchOnKey,
    UngronResult,
)
from .value_model import JSONNumber

__all__ = [
    "EncodingFailure",
    "ErrorType",
    "ExitCode",
    "Flattener",
    "GronError",
    "GronOptions",
    "GronResult",
    "GronTransformer",
    "IndexToken",
    "JSONNumber",
    "KeyToken",
    "MalformedStatement",
    "RootToken",
    "Statement",
    "StatementKind",
    "StatementParser",
    "Statements",
    "StructuralConflict",
    "TreeBuilder",
    "TypeMismatch",
    "TypeMismatchOnIndex",
    "TypeMismatchOnKey",
    "UngronResult",
    "compare",
    "encode_json",
    "flatten",
    "merge",
    "parse_statement",
]
