"""Constraint violation value object."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ConstraintViolation:
    """A single field-rule failure.

    Attributes:
        field: Path of the offending field (e.g. "name")
        message: What the rule requires
    """

    field: str
    message: str

    def format(self) -> str:
        """Render as ``"<CapitalizedField> - <message>"``."""
        return f"{self.field[:1].upper()}{self.field[1:]} - {self.message}"
