from typing import Annotated, Any

from fastapi import FastAPI, HTTPException, Path, Response, status
from fastapi.middleware.cors import CORSMiddleware

from people_api import __version__
from people_api.api.dependencies import HandlerDep, build_lifespan
from people_api.api.middleware import RequestLoggingMiddleware
from people_api.config import settings
from people_api.dto import HealthCheckResponse, PersonRequest, PersonResponse, ValidationErrorResponse
from people_api.entities import ID_MAX, ID_MIN
from people_api.protocols import PersonStore

BASE_URL = "/api/people"

PersonId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX, description="Person identifier")]


def create_app(repository: PersonStore | None = None) -> FastAPI:
    """Create the People API application.

    Args:
        repository: Storage backend. If None, Redis is used (see settings).

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="People API",
        description="CRUD endpoint for people backed by Redis",
        version=__version__,
        lifespan=build_lifespan(repository),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "People API",
            "version": __version__,
            "endpoints": {
                "people": BASE_URL,
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        if not await handler.health_check():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Person store is unreachable",
            )
        return HealthCheckResponse(status="healthy", store="connected")

    @app.get(BASE_URL, response_model=list[PersonResponse])
    async def find_all(handler: HandlerDep) -> list[PersonResponse]:
        """List every stored person."""
        return await handler.find_all()

    @app.get(
        BASE_URL + "/firstByName/{name}",
        response_model=PersonResponse,
        responses={404: {"description": "No person with this name"}},
    )
    async def find_first_by_name(name: str, handler: HandlerDep) -> PersonResponse | Response:
        """Find the first person with exactly this name."""
        return await handler.find_first_by_name(name)

    @app.get(
        BASE_URL + "/{person_id}",
        response_model=PersonResponse,
        responses={404: {"description": "Person not found"}},
    )
    async def find_by_id(person_id: PersonId, handler: HandlerDep) -> PersonResponse | Response:
        """Find a person by id."""
        return await handler.find_by_id(person_id)

    @app.delete(
        BASE_URL + "/{person_id}",
        response_model=str,
        responses={404: {"description": "Person not found"}},
    )
    async def delete_by_id(person_id: PersonId, handler: HandlerDep) -> Response:
        """Delete a person by id."""
        return await handler.delete_by_id(person_id)

    @app.post(
        BASE_URL,
        response_model=PersonResponse,
        responses={400: {"model": ValidationErrorResponse}},
    )
    async def save(request: PersonRequest, handler: HandlerDep) -> PersonResponse | Response:
        """Validate and persist a person."""
        return await handler.save(request)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "people_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
