"""Domain exceptions raised below the HTTP layer.

The handler turns these into HTTP responses; PersonValidationError becomes
a 400 ``ValidationErrorResponse``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from people_api.validation.violations import ConstraintViolation


class PeopleApiError(Exception):
    """Base class for people API domain errors."""


class PersonValidationError(PeopleApiError):
    """Raised when a person fails one or more field constraints.

    Attributes:
        violations: Every violated constraint, in stable order
    """

    def __init__(self, violations: "list[ConstraintViolation]") -> None:
        self.violations = violations
        super().__init__(self.message)

    @property
    def errors(self) -> list[str]:
        """Formatted violations, one ``"<Field> - <message>"`` per entry."""
        return [violation.format() for violation in self.violations]

    @property
    def message(self) -> str:
        """All formatted violations joined one per line."""
        return "\n".join(self.errors)
