"""Tree builder: folds an ordered sequence of statements into one value."""

import logging
from typing import Any, Iterable, Optional, Tuple

from .models import DEFAULT_ROOT_NAME, IndexToken, KeyToken, PathToken, Statement, StatementKind, render_path
from .types import StructuralConflict, TypeMismatchOnIndex, TypeMismatchOnKey
from .value_model import describe


class TreeBuilder:
    """
    Merges statements into a single decoded-JSON value.

    Statements are applied in the order given. Intermediate containers
    are created on demand, lists grow with ``None`` placeholders, and a
    ``None`` node is always free to become a mapping or a list. Merging is
    order dependent, so callers must pass statements in input order.
    """

    def __init__(self, root_name: Optional[str] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the tree builder.

        Args:
            root_name: Root identifier expected on incoming statements,
                used for the single-field unwrap
            logger: Optional logger instance
        """
        self.root_name = root_name or DEFAULT_ROOT_NAME
        self.logger = logger or logging.getLogger(__name__)

    def merge(self, statements: Iterable[Statement]) -> Any:
        """
        Merge statements into a value.

        Args:
            statements: Statements in input order

        Returns:
            The merged value, or None when there were no statements

        Raises:
            StructuralConflict: If two statements need incompatible node
                kinds at the same path
            TypeMismatchOnIndex: If an index is applied to a non-list node
            TypeMismatchOnKey: If a key is applied to a non-mapping node
        """
        root: Any = None
        count = 0
        for statement in statements:
            root = self._assign(root, statement.path, statement)
            count += 1

        self.logger.debug(f"Merged {count} statements")
        return root

    def unwrap_root(self, value: Any) -> Any:
        """
        Unwrap a mapping whose only field is named like the root token.

        This lets statements that were written with the root name repeated
        as a key (``json.json = 5;``) merge to the inner value.
        """
        if isinstance(value, dict) and len(value) == 1 and self.root_name in value:
            self.logger.debug(f"Unwrapping single top-level field {self.root_name!r}")
            return value[self.root_name]
        return value

    def _assign(self, root: Any, path: Tuple[PathToken, ...], statement: Statement) -> Any:
        """
        Return ``root`` with the statement applied.

        Walks the path with a (parent, slot) cursor, so path length is not
        limited by the call stack.
        """
        holder = [root]
        parent: Any = holder
        slot: Any = 0
        for depth in range(1, len(path)):
            node = parent.get(slot) if isinstance(parent, dict) else parent[slot]
            token = path[depth]
            if isinstance(token, KeyToken):
                if node is None:
                    node = parent[slot] = {}
                elif not isinstance(node, dict):
                    raise TypeMismatchOnKey(render_path(path[:depth]), token.name, describe(node))
                slot = token.name
            elif isinstance(token, IndexToken):
                if node is None:
                    node = parent[slot] = []
                elif not isinstance(node, list):
                    raise TypeMismatchOnIndex(render_path(path[:depth]), token.index, describe(node))
                if token.index >= len(node):
                    node.extend([None] * (token.index + 1 - len(node)))
                slot = token.index
            else:
                raise StructuralConflict(render_path(path[:depth + 1]), "root token inside a path")
            parent = node

        leaf = parent.get(slot) if isinstance(parent, dict) else parent[slot]
        parent[slot] = self._set_leaf(leaf, path, statement)
        return holder[0]

    def _set_leaf(self, node: Any, path: Tuple[PathToken, ...], statement: Statement) -> Any:
        if statement.kind == StatementKind.EMPTY_OBJECT:
            return self._declare_container(node, path, dict, list)
        if statement.kind == StatementKind.EMPTY_ARRAY:
            return self._declare_container(node, path, list, dict)

        if isinstance(node, (dict, list)) and node:
            raise StructuralConflict(
                render_path(path),
                f"cannot assign {statement.value_text()} to {render_path(path)}, "
                f"which already holds a {describe(node)}"
            )
        return statement.value

    def _declare_container(self, node: Any, path: Tuple[PathToken, ...],
                           wanted: type, other: type) -> Any:
        if isinstance(node, wanted):
            # Re-declaring an existing container keeps its children
            return node
        if isinstance(node, other):
            raise StructuralConflict(
                render_path(path),
                f"{render_path(path)} is declared as {_KIND_NAMES[wanted]} "
                f"but already holds a {describe(node)}"
            )
        return wanted()


_KIND_NAMES = {dict: "a mapping", list: "a list"}


def merge(statements: Iterable[Statement]) -> Any:
    """Merge statements with a default-configured TreeBuilder."""
    return TreeBuilder().merge(statements)
