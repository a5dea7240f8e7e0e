"""People API - asynchronous CRUD service for person records.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (PersonStore)
    - repositories: Data access implementations (Redis)
    - validation: Field constraints checked before saving
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from people_api.handlers import PersonHandler
    from people_api.repositories import RedisPersonRepository
    from people_api.validation import PersonValidator

    handler = PersonHandler(
        repository=RedisPersonRepository.create(),
        validator=PersonValidator(),
    )
    ```

For HTTP API:
    ```python
    from people_api.api.app import app
    ```
"""

__version__ = "0.1.0"

from people_api.config import get_redis_client, settings  # noqa: E402
from people_api.dto import PersonRequest, PersonResponse  # noqa: E402
from people_api.entities import PersonEntity  # noqa: E402
from people_api.exceptions import PeopleApiError, PersonValidationError  # noqa: E402
from people_api.handlers import PersonHandler  # noqa: E402
from people_api.protocols import PersonStore  # noqa: E402
from people_api.repositories import RedisPersonRepository  # noqa: E402
from people_api.validation import ConstraintViolation, PersonValidator  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "PersonStore",
    # Validation
    "PersonValidator",
    "ConstraintViolation",
    # Errors
    "PeopleApiError",
    "PersonValidationError",
    # Handlers (HTTP)
    "PersonHandler",
    # Repositories (data access)
    "RedisPersonRepository",
    # Entities (domain models)
    "PersonEntity",
    # DTOs (API contracts)
    "PersonRequest",
    "PersonResponse",
]
