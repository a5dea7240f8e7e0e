"""Field-level validation applied to entities before they are persisted."""

from .person_validator import NAME_MAX_LENGTH, NAME_MIN_LENGTH, PersonValidator
from .violations import ConstraintViolation

__all__ = [
    "ConstraintViolation",
    "PersonValidator",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
]
