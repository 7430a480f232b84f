"""Configuration system for treevisit.

The defaults walk ESTree-style trees exactly as parsers emit them. A config
only needs to be passed when a tree keeps metadata under different field
names, or when visits should be traced through logging.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List

# Source position metadata and opaque user data never hold children
DEFAULT_RESERVED_KEYS: FrozenSet[str] = frozenset({"data", "position"})


@dataclass(frozen=True)
class VisitConfig:
    """Configuration for a single traversal."""

    # Field names never descended into, even when they hold nodes
    reserved_keys: FrozenSet[str] = field(default_factory=lambda: DEFAULT_RESERVED_KEYS)

    # Debug tracing
    log_visits: bool = False   # One DEBUG record per enter/leave
    use_color: bool = False    # ANSI-highlight node types in those records

    @classmethod
    def tracing(cls, use_color: bool = False) -> 'VisitConfig':
        """Create config that logs every enter and leave.

        Args:
            use_color: Highlight node types in the log output

        Returns:
            VisitConfig with visit logging turned on
        """
        return cls(log_visits=True, use_color=use_color)

    def with_reserved(self, *names: str) -> 'VisitConfig':
        """Return a copy that also reserves ``names``."""
        return VisitConfig(
            reserved_keys=frozenset(self.reserved_keys) | frozenset(names),
            log_visits=self.log_visits,
            use_color=self.use_color,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.reserved_keys, str):
            errors.append("reserved_keys must be a collection of names, not a string")
        else:
            for name in sorted(self.reserved_keys, key=repr):
                if not isinstance(name, str) or not name:
                    errors.append(f"reserved key {name!r} must be a non-empty string")

        return errors
