"""Depth-first enter/leave traversal for treevisit.

The traverser walks any tree of node-like records, calling ``enter`` before
a node's children are walked (pre-order) and ``leave`` after (post-order).
Callbacks steer the walk through the signals in :mod:`.actions`.

Callbacks may rewrite the tree while it is being walked. Sibling lists are
therefore never cached: their length is re-read before every step, and a
callback that inserts or removes siblings returns the index to resume at.
"""

import logging
from typing import Any, List, Optional

from ..config import VisitConfig
from .actions import EXIT, SKIP, ActionTuple, VisitorCallback
from .label import node_label
from .node import field_names, is_node_like, is_sequence, read_field
from .result import result_action, result_index, to_result

logger = logging.getLogger(__name__)


class NodeTraverser:
    """Walks a tree depth-first, running enter/leave callbacks.

    A traverser holds no per-walk state, so one instance can run any
    number of sequential traversals.
    """

    def __init__(self,
                 enter: Optional[VisitorCallback] = None,
                 leave: Optional[VisitorCallback] = None,
                 config: Optional[VisitConfig] = None):
        """Initialize traverser with its callbacks.

        Args:
            enter: Called before a node's children are walked
            leave: Called after a node's children are walked
            config: Traversal configuration (defaults apply when None)
        """
        self.enter = enter
        self.leave = leave
        self.config = config or VisitConfig()
        self._reserved = frozenset(self.config.reserved_keys)

    def traverse(self, tree: Any) -> ActionTuple:
        """Walk ``tree`` from the top.

        The root is handled leniently: when it is not node-like no callback
        fires for it, but its fields are still searched for nodes.

        Args:
            tree: Root of the tree to walk

        Returns:
            Result of the last callback to run for the root, or of the
            callback that asked to exit
        """
        if self.enter is None and self.leave is None:
            return ()

        if is_node_like(tree):
            return self._visit(tree, None, None, [])

        result = self._visit_children(tree, [])
        return result if result is not None else ()

    def _visit(self, node: Any, key: Optional[str], index: Optional[int],
               ancestors: List[Any]) -> ActionTuple:
        result = self._call(self.enter, "enter", node, key, index, ancestors)

        if result_action(result) is EXIT:
            return result

        if result_action(result) is not SKIP:
            exited = self._visit_children(node, ancestors)
            if exited is not None:
                return exited

        if self.leave is None:
            return result
        return self._call(self.leave, "leave", node, key, index, ancestors)

    def _visit_children(self, node: Any, ancestors: List[Any]) -> Optional[ActionTuple]:
        """Walk every child of ``node``.

        Returns:
            The exiting result if a descendant asked to exit, else None
        """
        for key in field_names(node):
            if key in self._reserved:
                continue

            present, value = read_field(node, key)
            if not present or value is None:
                continue

            if is_sequence(value):
                exited = self._visit_list(value, key, node, ancestors)
                if exited is not None:
                    return exited
            elif is_node_like(value):
                subresult = self._visit(value, key, None, ancestors + [node])
                if result_action(subresult) is EXIT:
                    return subresult

        return None

    def _visit_list(self, nodes: Any, key: str, parent: Any,
                    ancestors: List[Any]) -> Optional[ActionTuple]:
        index = 0

        # len() is re-read each step since callbacks may splice the list
        while 0 <= index < len(nodes):
            subvalue = nodes[index]

            if is_node_like(subvalue):
                # Fresh list per child: siblings must not see each other's edits
                subresult = self._visit(subvalue, key, index, ancestors + [parent])
                if result_action(subresult) is EXIT:
                    return subresult
                resume = result_index(subresult)
                index = resume if resume is not None else index + 1
            else:
                index += 1

        return None

    def _call(self, callback: Optional[VisitorCallback], phase: str, node: Any,
              key: Optional[str], index: Optional[int], ancestors: List[Any]) -> ActionTuple:
        if callback is None:
            return ()

        if self.config.log_visits and logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s key=%r index=%r depth=%d", phase,
                         node_label(node, self.config.use_color), key, index, len(ancestors))

        result = to_result(callback(node, key, index, ancestors))

        if self.config.log_visits and result_action(result) is EXIT:
            logger.debug("exit requested on %s %s", phase,
                         node_label(node, self.config.use_color))

        return result
