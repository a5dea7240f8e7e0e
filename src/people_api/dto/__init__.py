"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal logic should use entities from the entities package.
"""

from .requests import PersonRequest
from .responses import HealthCheckResponse, PersonResponse, ValidationErrorResponse

__all__ = [
    "PersonRequest",
    "PersonResponse",
    "ValidationErrorResponse",
    "HealthCheckResponse",
]
