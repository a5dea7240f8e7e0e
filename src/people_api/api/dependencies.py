"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Repository, validator and handler stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from people_api.config import settings
from people_api.handlers import PersonHandler
from people_api.protocols import PersonStore
from people_api.repositories import RedisPersonRepository
from people_api.utils import get_logger
from people_api.validation import PersonValidator

logger = get_logger(__name__)


def get_handler(request: Request) -> PersonHandler:
    """Dependency injection for PersonHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PersonHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "person_handler", None)
    if handler is None:
        raise RuntimeError("PersonHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    repository: PersonStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Args:
        repository: Storage backend to use. If None, a RedisPersonRepository
            is created from settings on startup and closed on shutdown.

    Returns:
        Lifespan callable suitable for ``FastAPI(lifespan=...)``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = repository is None
        store: PersonStore = RedisPersonRepository.create() if owned else repository

        app.state.repository = store
        app.state.person_handler = PersonHandler(repository=store, validator=PersonValidator())

        logger.info("People API started (store: %s)", type(store).__name__)
        if owned:
            logger.info("Redis URL: %s, key prefix: %s", settings.redis_url, settings.people_key_prefix)
            if not await store.health_check():
                logger.warning("Redis is not reachable yet; requests will fail until it is")

        yield

        del app.state.person_handler
        del app.state.repository
        if owned:
            await store.close()
        logger.info("People API shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[PersonHandler, Depends(get_handler)]
