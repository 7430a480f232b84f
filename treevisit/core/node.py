"""Node classification for treevisit.

A node is intentionally loose: any record carrying a non-empty string
``type``. Records are either mappings (the JSON shape parsers emit) or
plain objects whose instance attributes hold the fields. Everything else
is opaque data that the traverser neither visits nor descends into.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

# Missing-field marker, distinct from a field explicitly set to None
_MISSING = object()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


def is_record(value: Any) -> bool:
    """Check if a value is a structured record that can hold fields.

    Args:
        value: Anything

    Returns:
        True for mappings and objects with instance attributes
    """
    if value is None or isinstance(value, _SCALARS):
        return False
    if isinstance(value, Mapping):
        return True
    return hasattr(value, "__dict__") and not isinstance(value, type)


def is_sequence(value: Any) -> bool:
    """Check if a value is an ordered list of siblings."""
    return isinstance(value, (list, tuple))


def node_type(value: Any) -> Optional[str]:
    """Return the ``type`` tag of a record, or None if it has none."""
    if isinstance(value, Mapping):
        tag = value.get("type")
    elif is_record(value):
        tag = getattr(value, "type", None)
    else:
        return None
    return tag if isinstance(tag, str) else None


def is_node_like(value: Any) -> bool:
    """Check if something looks like a node.

    Args:
        value: Anything

    Returns:
        True if ``value`` is a record with a non-empty string ``type``
    """
    return bool(node_type(value))


def field_names(record: Any) -> List[str]:
    """Snapshot the field names of a record in insertion order.

    Names are copied so callbacks can add or drop fields on the record
    while its children are being walked.
    """
    if isinstance(record, Mapping):
        return list(record.keys())
    if is_record(record):
        return list(vars(record).keys())
    return []


def read_field(record: Any, name: str) -> Tuple[bool, Any]:
    """Read the current value of a field.

    Returns:
        ``(present, value)``; ``present`` is False when the field was
        removed since the names were snapshotted.
    """
    if isinstance(record, Mapping):
        value = record.get(name, _MISSING)
    else:
        value = vars(record).get(name, _MISSING)
    if value is _MISSING:
        return False, None
    return True, value
