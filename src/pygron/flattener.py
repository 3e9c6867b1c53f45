"""Flattener: walks a decoded JSON value and emits path statements."""

import logging
from typing import Any, List, Optional

from .models import DEFAULT_ROOT_NAME, IndexToken, KeyToken, PathToken, RootToken, Statement, Statements
from .value_model import ValueKind, detect_value_kind


class Flattener:
    """
    Produces one statement per container and one per leaf.

    The traversal is depth-first and pre-order, so every container
    declaration precedes the statements for its children. Mappings are
    walked in their current key order and lists in index order.
    """

    def __init__(self, root_name: str = DEFAULT_ROOT_NAME,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            root_name: Identifier rendered for the root token
            logger: Optional logger instance
        """
        self.root_name = root_name
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, value: Any) -> Statements:
        """
        Flatten a value into statements.

        Args:
            value: Value produced by a conforming JSON decoder

        Returns:
            Statements in pre-order
        """
        statements = Statements()
        self._walk(value, [RootToken(self.root_name)], statements)
        self.logger.debug(f"Flattened value into {len(statements)} statements")
        return statements

    def _walk(self, value: Any, path: List[PathToken], out: Statements) -> None:
        kind = detect_value_kind(value)

        if kind == ValueKind.MAPPING:
            out.add(Statement.empty_object(path))
            for key, child in value.items():
                self._walk(child, path + [KeyToken(key)], out)
        elif kind == ValueKind.LIST:
            out.add(Statement.empty_array(path))
            for index, child in enumerate(value):
                self._walk(child, path + [IndexToken(index)], out)
        else:
            out.add(Statement.scalar(path, value))


def flatten(value: Any, root_name: str = DEFAULT_ROOT_NAME) -> Statements:
    """Flatten a value with a default-configured Flattener."""
    return Flattener(root_name).flatten(value)
