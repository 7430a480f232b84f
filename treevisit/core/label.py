"""Human readable labels for nodes, used in debug output."""

from typing import Any

from .node import node_type

_YELLOW = "\x1b[33m"
_RESET_FG = "\x1b[39m"


def color(text: str) -> str:
    """Wrap text in ANSI yellow."""
    return f"{_YELLOW}{text}{_RESET_FG}"


def node_label(node: Any, use_color: bool = False) -> str:
    """Describe a node as ``node (<type>)``.

    Args:
        node: Value being visited
        use_color: Highlight the type with ANSI escapes

    Returns:
        Label string; plain ``node`` for values without a type
    """
    tag = node_type(node)
    if not tag:
        return "node"
    return f"node ({color(tag) if use_color else tag})"
