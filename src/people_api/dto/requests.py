"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from people_api.entities import ID_MAX, ID_MIN, PersonEntity


class PersonRequest(BaseModel):
    """Request DTO for saving a person.

    Only the id is bounded here. Name rules are checked by PersonValidator
    in the handler so every violation is reported together.
    """

    id: int | None = Field(
        None,
        description="Identifier for an upsert; assigned when null",
        ge=ID_MIN,
        le=ID_MAX,
    )
    name: str | None = Field(None, description="Person name (1-30 characters, not blank)")

    def to_entity(self) -> PersonEntity:
        """Convert the request body to a domain entity."""
        return PersonEntity(id=self.id, name=self.name)
