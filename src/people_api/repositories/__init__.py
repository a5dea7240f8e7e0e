"""Repository layer for data access.

This layer hides the storage backend behind the PersonStore protocol.
Repositories are protocol-based (structural typing), not inheritance-based:
any class implementing the required methods satisfies the protocol.
"""

from people_api.protocols import PersonStore

from .redis_repository import RedisPersonRepository

__all__ = [
    "PersonStore",
    "RedisPersonRepository",
]
