"""Control signals for treevisit.

Visitor callbacks steer a traversal by returning one of the actions defined
here, a sibling index, a tuple combining both, or nothing at all.
"""

from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union


class Action(Enum):
    """What the traverser should do after a callback returns.

    Members are singletons, so they keep their identity for the lifetime
    of the process and never compare equal to an index.
    """
    CONTINUE = "continue"   # Proceed as normal
    SKIP = "skip"           # Do not descend into this node's children
    EXIT = "exit"           # Stop traversing immediately

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


#: Continue traversing as normal.
CONTINUE = Action.CONTINUE
#: Do not traverse this node's children.
SKIP = Action.SKIP
#: Stop traversing immediately.
EXIT = Action.EXIT


# Move to the sibling at this position next, once the current node is
# completely traversed. Useful when the visitor removes the current node
# or one of its previous siblings. Values below 0 or at/after the end of
# the list stop traversing that list.
Index = int

# One or two values: an action, then an index.
ActionTuple = Union[
    Tuple[()],
    Tuple[Optional[Action]],
    Tuple[Optional[Action], Optional[Index]],
    List[Any],
]

# Anything a visitor callback may hand back.
VisitResult = Union[None, Action, Index, ActionTuple, Sequence[Any]]

# Called as ``callback(node, key, index, ancestors)``.
VisitorCallback = Callable[[Any, Optional[str], Optional[int], List[Any]], VisitResult]
