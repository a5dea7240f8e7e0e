"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by the handler,
validator and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .person import ID_MAX, ID_MIN, PersonEntity

__all__ = ["PersonEntity", "ID_MIN", "ID_MAX"]
