"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from people_api.entities import PersonEntity


class PersonResponse(BaseModel):
    """Response DTO for a stored person."""

    id: int | None = Field(..., description="Repository-assigned identifier")
    name: str | None = Field(..., description="Person name")

    @classmethod
    def from_entity(cls, person: PersonEntity) -> "PersonResponse":
        """Build the response DTO from a domain entity."""
        return cls(id=person.id, name=person.name)


class ValidationErrorResponse(BaseModel):
    """Response DTO for a rejected save."""

    detail: str = Field(..., description="All violations joined one per line")
    errors: list[str] = Field(
        default_factory=list,
        description="Each violation formatted as '<Field> - <message>'",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store: str = Field(..., description="Repository connectivity: 'connected' or 'unreachable'")
