"""treevisit - depth-first enter/leave traversal for syntax trees.

treevisit walks any tree whose nodes are records with a non-empty ``type``
field (ESTree JSON and friends), calling your callbacks on the way in and
out of every node.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treevisit import visit, SKIP, EXIT

    def enter(node, key, index, ancestors):
        if node["type"] == "FunctionDeclaration":
            return SKIP

    visit(tree, enter)
    visit(tree, {"enter": enter, "leave": leave})
━━━━━━━━━━━━━━━━━━━━━━━━━━

Callbacks return nothing to continue, ``SKIP`` to leave a node's children
alone, ``EXIT`` to stop, or an index to resume the enclosing sibling list at.
"""

import logging

__version__ = "0.1.0"

from .core.actions import CONTINUE, SKIP, EXIT, Action
from .core.node import is_node_like
from .core.result import to_result
from .core.traverser import NodeTraverser
from .core.visitor import Visitors
from .core.label import node_label
from .config import VisitConfig
from .exceptions import ConfigurationError
from .api import visit, count_nodes, find_nodes, find_first

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Signals
    "Action",
    "CONTINUE",
    "SKIP",
    "EXIT",
    # Core
    "NodeTraverser",
    "Visitors",
    "is_node_like",
    "to_result",
    "node_label",
    # Config
    "VisitConfig",
    "ConfigurationError",
    # API
    "visit",
    "count_nodes",
    "find_nodes",
    "find_first",
]
