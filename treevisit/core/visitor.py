"""Visitor shapes accepted by the traverser.

A visitor can be:
- ``None``: nothing is called
- a callable: used as the ``enter`` callback
- a record exposing optional ``enter`` / ``leave`` callbacks, either a
  mapping with those keys or any object with those attributes (such as
  :class:`Visitors` or a class defining ``enter``/``leave`` methods)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .actions import VisitorCallback


@dataclass(frozen=True)
class Visitors:
    """Pair of optional callbacks run on the way into and out of a node."""

    enter: Optional[VisitorCallback] = None
    leave: Optional[VisitorCallback] = None


def resolve_visitor(
    visitor: Any,
) -> Tuple[Optional[VisitorCallback], Optional[VisitorCallback]]:
    """Split a visitor into its ``enter`` and ``leave`` callbacks.

    Args:
        visitor: Visitor in any of the accepted shapes

    Returns:
        ``(enter, leave)``, either of which may be None

    Raises:
        TypeError: If the visitor has no usable shape or a callback
            is not callable
    """
    if visitor is None:
        return None, None

    if isinstance(visitor, Mapping):
        enter = visitor.get("enter")
        leave = visitor.get("leave")
    elif hasattr(visitor, "enter") or hasattr(visitor, "leave"):
        enter = getattr(visitor, "enter", None)
        leave = getattr(visitor, "leave", None)
    elif callable(visitor):
        return visitor, None
    else:
        raise TypeError(
            f"visitor must be a callable or have enter/leave callbacks, "
            f"got {type(visitor).__name__}"
        )

    for name, callback in (("enter", enter), ("leave", leave)):
        if callback is not None and not callable(callback):
            raise TypeError(f"visitor.{name} must be callable, got {type(callback).__name__}")

    return enter, leave
