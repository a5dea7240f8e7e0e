"""Person domain entity."""

from dataclasses import dataclass

# Identifiers are signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


@dataclass(frozen=True)
class PersonEntity:
    """Domain entity for a stored or submitted person.

    Attributes:
        id: Repository-assigned identifier, None until persisted
        name: Display name, checked by the validator before saving
    """

    id: int | None
    name: str | None
