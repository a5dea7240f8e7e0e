"""HTTP handlers for person operations.

Handlers convert between DTOs (API contracts) and repository calls.
They handle HTTP concerns: status codes, empty results and validation errors.
Repository failures are not caught here and surface as 500 responses.
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse

from people_api.dto import PersonRequest, PersonResponse, ValidationErrorResponse
from people_api.exceptions import PersonValidationError
from people_api.protocols import PersonStore
from people_api.validation import PersonValidator

DELETED_MESSAGE = "successfully deleted!"


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


class PersonHandler:
    """HTTP handlers for the person resource.

    Example:
        ```python
        handler = PersonHandler(
            repository=RedisPersonRepository.create(),
            validator=PersonValidator(),
        )

        @app.get("/api/people/{person_id}")
        async def find_by_id(person_id: int):
            return await handler.find_by_id(person_id)
        ```
    """

    def __init__(self, repository: PersonStore, validator: PersonValidator) -> None:
        """Initialize the person handler.

        Args:
            repository: Person storage backend (required).
            validator: Validator applied before every save (required).
        """
        self._repository = repository
        self._validator = validator

    async def find_all(self) -> list[PersonResponse]:
        """Handle GET /api/people requests.

        Returns:
            Every stored person, in repository order
        """
        return [PersonResponse.from_entity(person) async for person in self._repository.find_all()]

    async def find_by_id(self, person_id: int) -> PersonResponse | Response:
        """Handle GET /api/people/{id} requests.

        Returns:
            The person, or an empty 404 response if absent
        """
        person = await self._repository.find_by_id(person_id)
        if person is None:
            return _not_found()
        return PersonResponse.from_entity(person)

    async def find_first_by_name(self, name: str) -> PersonResponse | Response:
        """Handle GET /api/people/firstByName/{name} requests.

        Returns:
            The first matching person, or an empty 404 response
        """
        person = await self._repository.find_first_by_name(name)
        if person is None:
            return _not_found()
        return PersonResponse.from_entity(person)

    async def delete_by_id(self, person_id: int) -> Response:
        """Handle DELETE /api/people/{id} requests.

        Looks the person up first and deletes only when found.

        Returns:
            JSON string "successfully deleted!", or an empty 404 response
        """
        person = await self._repository.find_by_id(person_id)
        if person is None:
            return _not_found()

        await self._repository.delete(person)
        return JSONResponse(content=DELETED_MESSAGE)

    async def save(self, request: PersonRequest) -> PersonResponse | JSONResponse:
        """Handle POST /api/people requests.

        The body is validated before the repository is called.

        Returns:
            The persisted person, or a 400 response listing every violation
        """
        try:
            person = self._validator.check(request.to_entity())
        except PersonValidationError as e:
            body = ValidationErrorResponse(detail=e.message, errors=e.errors)
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

        saved = await self._repository.save(person)
        return PersonResponse.from_entity(saved)

    async def health_check(self) -> bool:
        """Report whether the repository is reachable."""
        return await self._repository.health_check()
