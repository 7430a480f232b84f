"""High-level API for treevisit.

This module provides the ``visit`` entry point plus a few functional helpers
for common read-only walks. They wrap :class:`NodeTraverser` for ease of
use in simple cases.
"""

from typing import Any, Callable, List, Optional

from .config import VisitConfig
from .core.actions import EXIT
from .core.traverser import NodeTraverser
from .core.visitor import resolve_visitor
from .exceptions import ConfigurationError


def visit(tree: Any, visitor: Any = None, config: Optional[VisitConfig] = None) -> None:
    """Walk a tree depth-first, calling the visitor for every node.

    Callbacks receive ``(node, key, index, ancestors)``: the field under
    which ``node`` lives in its parent (None for the root), its position
    when that field holds a list (None otherwise), and the list of its
    ancestors, root first.

    Args:
        tree: Root of the tree to walk
        visitor: ``enter`` callable, or record with optional ``enter`` and
            ``leave`` callbacks
        config: Traversal configuration

    Raises:
        ConfigurationError: If ``config`` is invalid
        TypeError: If ``visitor`` has no usable shape

    Example:
        >>> def enter(node, key, index, ancestors):
        ...     if node["type"] == "FunctionDeclaration":
        ...         return SKIP
        >>> visit(tree, enter)
    """
    config = _check_config(config)
    enter, leave = resolve_visitor(visitor)
    NodeTraverser(enter, leave, config).traverse(tree)


def count_nodes(tree: Any, config: Optional[VisitConfig] = None) -> int:
    """Count the nodes in a tree.

    Args:
        tree: Root of the tree to walk
        config: Traversal configuration

    Returns:
        Number of node-like values reached

    Example:
        >>> count_nodes({"type": "Program", "body": []})
        1
    """
    count = 0

    def enter(node, key, index, ancestors):
        nonlocal count
        count += 1

    visit(tree, enter, config)
    return count


def find_nodes(
    tree: Any,
    predicate: Callable[[Any], bool],
    config: Optional[VisitConfig] = None
) -> List[Any]:
    """Find nodes that match a predicate.

    Args:
        tree: Root of the tree to walk
        predicate: Function that returns True for matching nodes
        config: Traversal configuration

    Returns:
        Matching nodes in pre-order

    Example:
        >>> calls = find_nodes(tree, lambda n: n["type"] == "CallExpression")
    """
    found = []

    def enter(node, key, index, ancestors):
        if predicate(node):
            found.append(node)

    visit(tree, enter, config)
    return found


def find_first(
    tree: Any,
    predicate: Callable[[Any], bool],
    config: Optional[VisitConfig] = None
) -> Optional[Any]:
    """Find the first node, in pre-order, that matches a predicate.

    The walk stops as soon as a match is found.
    """
    found = []

    def enter(node, key, index, ancestors):
        if predicate(node):
            found.append(node)
            return EXIT

    visit(tree, enter, config)
    return found[0] if found else None


def _check_config(config: Optional[VisitConfig]) -> VisitConfig:
    config = config or VisitConfig()
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    return config


__all__ = [
    'visit',
    'count_nodes',
    'find_nodes',
    'find_first',
]
