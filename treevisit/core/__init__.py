"""Core pieces of treevisit.

This package contains the traversal engine and the small helpers it is built
from: control signals, result normalization and node classification.
"""

from .actions import CONTINUE, EXIT, SKIP, Action
from .node import is_node_like
from .result import to_result
from .traverser import NodeTraverser
from .visitor import Visitors, resolve_visitor

__all__ = [
    "Action",
    "CONTINUE",
    "SKIP",
    "EXIT",
    "is_node_like",
    "to_result",
    "NodeTraverser",
    "Visitors",
    "resolve_visitor",
]
