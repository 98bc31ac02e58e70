"""Frame-level helpers built on the containment predicates."""

from .spatial import mark_within

__all__ = ["mark_within"]
