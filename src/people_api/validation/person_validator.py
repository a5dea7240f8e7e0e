"""Validator for person entities.

Rules on ``name``:
    - not null
    - not blank (null or whitespace-only counts as blank)
    - length between NAME_MIN_LENGTH and NAME_MAX_LENGTH inclusive
      (skipped when null)
"""

from people_api.entities import PersonEntity
from people_api.exceptions import PersonValidationError
from people_api.utils import get_logger

from .violations import ConstraintViolation

logger = get_logger(__name__)

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 30


class PersonValidator:
    """Collects every constraint violation on a person.

    Example:
        ```python
        validator = PersonValidator()
        validator.validate(PersonEntity(id=None, name=""))
        # [ConstraintViolation(field='name', message='must not be blank'),
        #  ConstraintViolation(field='name', message='size must be between 1 and 30')]
        ```
    """

    def __init__(
        self,
        name_min_length: int = NAME_MIN_LENGTH,
        name_max_length: int = NAME_MAX_LENGTH,
    ) -> None:
        if not 0 <= name_min_length <= name_max_length:
            raise ValueError("name length bounds must satisfy 0 <= min <= max")
        self._min = name_min_length
        self._max = name_max_length

    def validate(self, person: PersonEntity) -> list[ConstraintViolation]:
        """Return all violations, sorted by field then message."""
        violations = []
        name = person.name

        if name is None:
            violations.append(ConstraintViolation("name", "must not be null"))

        if name is None or not name.strip():
            violations.append(ConstraintViolation("name", "must not be blank"))

        if name is not None and not self._min <= len(name) <= self._max:
            violations.append(
                ConstraintViolation("name", f"size must be between {self._min} and {self._max}")
            )

        return sorted(violations)

    def check(self, person: PersonEntity) -> PersonEntity:
        """Validate a person and return it unchanged when it passes.

        Raises:
            PersonValidationError: If at least one constraint is violated
        """
        logger.info("validating person -> %s", person)
        violations = self.validate(person)
        if violations:
            error = PersonValidationError(violations)
            logger.info("person %s validated - %s", person, error.errors)
            raise error
        return person
