"""Person storage protocol.

Defines the async interface for any backend that can persist and look up
person records.
"""

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from people_api.entities import PersonEntity


@runtime_checkable
class PersonStore(Protocol):
    """Protocol for person storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed. Every method is non-blocking.

    Example:
        ```python
        from people_api.protocols import PersonStore

        repo: PersonStore = RedisPersonRepository.create()
        repo: PersonStore = InMemoryPersonStore()  # e.g. in tests
        ```
    """

    def find_all(self) -> AsyncIterator[PersonEntity]:
        """Stream every stored person in repository order.

        Returns:
            Async iterator of persons, each with a non-null id
        """
        ...

    async def find_by_id(self, person_id: int) -> PersonEntity | None:
        """Look up a person by identifier.

        Args:
            person_id: The identifier to look up

        Returns:
            The stored person, or None if absent
        """
        ...

    async def find_first_by_name(self, name: str) -> PersonEntity | None:
        """Look up the first person whose name matches exactly.

        Args:
            name: The name to match

        Returns:
            The first matching person, or None if nobody matches
        """
        ...

    async def save(self, person: PersonEntity) -> PersonEntity:
        """Insert or update a person.

        Args:
            person: The person to persist; a null id asks for a new one

        Returns:
            The person as persisted, with its id set
        """
        ...

    async def delete(self, person: PersonEntity) -> None:
        """Remove a stored person.

        Args:
            person: The person to remove, identified by its id
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
