"""Protocol interfaces for swappable implementations.

Protocols enable:
- Easy swapping of storage backends (Redis -> PostgreSQL, in-memory, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from people_api.protocols import PersonStore

    repo: PersonStore = RedisPersonRepository.create()
    ```
"""

from .person_store import PersonStore

__all__ = [
    "PersonStore",
]
