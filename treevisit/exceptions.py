"""Exceptions raised by treevisit itself.

Errors raised inside visitor callbacks are never wrapped; they reach the
caller of ``visit`` unchanged.
"""


class ConfigurationError(ValueError):
    """Raised when a VisitConfig fails validation."""
    pass
