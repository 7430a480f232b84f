"""Normalization of visitor return values.

Callbacks are allowed to be terse: they may return an action, a bare sibling
index, a tuple of both, or nothing. The traverser only ever deals with the
tuple form produced here.
"""

from typing import Any, Optional

from .actions import CONTINUE, Action, ActionTuple


def _is_index(value: Any) -> bool:
    # bool is an int subclass but is never a position
    return isinstance(value, int) and not isinstance(value, bool)


def to_result(value: Any) -> ActionTuple:
    """Turn a callback's return value into a clean result.

    Args:
        value: Whatever the visitor returned

    Returns:
        ``value`` itself when it is already a list or tuple,
        ``(CONTINUE, value)`` for a bare index, and ``(value,)`` otherwise.

    Example:
        >>> to_result(3)
        (Action.CONTINUE, 3)
        >>> to_result(None)
        (None,)
    """
    if isinstance(value, (list, tuple)):
        return value

    if _is_index(value):
        return (CONTINUE, value)

    return (value,)


def result_action(result: ActionTuple) -> Optional[Action]:
    """Return the action of a normalized result, if any."""
    return result[0] if len(result) > 0 else None


def result_index(result: ActionTuple) -> Optional[int]:
    """Return the resume index of a normalized result, if any."""
    if len(result) > 1 and _is_index(result[1]):
        return result[1]
    return None
