"""Redis implementation of PersonStore.

Layout under a configurable key prefix (default ``people``):
    - ``<prefix>:<id>``         hash with ``id`` and ``name`` fields
    - ``<prefix>:ids``          sorted set of all ids (score = id)
    - ``<prefix>:name:<name>``  sorted set of ids holding that exact name
    - ``<prefix>:seq``          counter used to assign new ids
"""

from collections.abc import AsyncIterator

import redis.asyncio as redis
from redis.exceptions import RedisError

from people_api.config import get_redis_client, settings
from people_api.entities import PersonEntity
from people_api.utils import get_logger

logger = get_logger(__name__)


class RedisPersonRepository:
    """Async Redis implementation of the PersonStore protocol.

    This class satisfies the PersonStore protocol through structural
    typing - no explicit inheritance needed.

    Repository order is ascending id. "First by name" is the lowest id
    whose name matches exactly.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
        page_size: int | None = None,
    ) -> None:
        """Initialize the Redis person repository.

        Args:
            redis_client: Async Redis client (decode_responses=True). If None, creates default.
            key_prefix: Prefix for every key this repository owns.
            page_size: Number of ids fetched per round trip by find_all.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.people_key_prefix
        self._page_size = page_size or settings.people_page_size

    @classmethod
    def create(
        cls,
        key_prefix: str | None = None,
        page_size: int | None = None,
    ) -> "RedisPersonRepository":
        """Factory method to create RedisPersonRepository with defaults.

        Args:
            key_prefix: Key prefix. If None, uses settings.
            page_size: find_all page size. If None, uses settings.

        Returns:
            Configured RedisPersonRepository
        """
        return cls(key_prefix=key_prefix, page_size=page_size)

    def _record_key(self, person_id: int) -> str:
        return f"{self._prefix}:{person_id}"

    def _name_key(self, name: str) -> str:
        return f"{self._prefix}:name:{name}"

    @property
    def _ids_key(self) -> str:
        return f"{self._prefix}:ids"

    @property
    def _seq_key(self) -> str:
        return f"{self._prefix}:seq"

    @staticmethod
    def _to_entity(data: dict[str, str]) -> PersonEntity:
        return PersonEntity(id=int(data["id"]), name=data.get("name"))

    async def find_all(self) -> AsyncIterator[PersonEntity]:
        """Stream every stored person in ascending id order.

        Ids are read in pages of ``page_size``, each page starting after the
        last id seen, so deletes between pages never shift later records
        out of the listing.
        """
        lower = "-inf"
        while True:
            ids = await self._client.zrangebyscore(
                self._ids_key, lower, "+inf", start=0, num=self._page_size
            )
            if not ids:
                return

            pipe = self._client.pipeline(transaction=False)
            for person_id in ids:
                pipe.hgetall(self._record_key(int(person_id)))
            records = await pipe.execute()

            for data in records:
                if data:
                    yield self._to_entity(data)

            lower = f"({ids[-1]}"

    async def find_by_id(self, person_id: int) -> PersonEntity | None:
        """Look up a person by identifier."""
        data = await self._client.hgetall(self._record_key(person_id))
        if not data:
            return None
        return self._to_entity(data)

    async def find_first_by_name(self, name: str) -> PersonEntity | None:
        """Look up the lowest-id person with exactly this name."""
        ids = await self._client.zrange(self._name_key(name), 0, 0)
        if not ids:
            return None
        return await self.find_by_id(int(ids[0]))

    async def _next_id(self) -> int:
        # Skip ids already taken by saves that supplied their own id
        while True:
            person_id = int(await self._client.incr(self._seq_key))
            if not await self._client.exists(self._record_key(person_id)):
                return person_id

    async def save(self, person: PersonEntity) -> PersonEntity:
        """Insert or update a person, assigning an id when it is null.

        Returns:
            The person as persisted
        """
        if person.id is None:
            person_id = await self._next_id()
            previous = None
        else:
            person_id = person.id
            previous = await self.find_by_id(person_id)

        saved = PersonEntity(id=person_id, name=person.name)
        key = self._record_key(person_id)
        mapping = {"id": str(person_id)}
        if saved.name is not None:
            mapping["name"] = saved.name

        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.hset(key, mapping=mapping)
            pipe.zadd(self._ids_key, {str(person_id): person_id})
            if previous is not None and previous.name is not None and previous.name != saved.name:
                pipe.zrem(self._name_key(previous.name), str(person_id))
            if saved.name is not None:
                pipe.zadd(self._name_key(saved.name), {str(person_id): person_id})
            await pipe.execute()

        logger.debug("saved person %s", saved)
        return saved

    async def delete(self, person: PersonEntity) -> None:
        """Remove a person and its index entries.

        A person without an id was never stored, so nothing is removed.
        """
        if person.id is None:
            return

        stored = await self.find_by_id(person.id)
        name = stored.name if stored is not None else person.name

        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(self._record_key(person.id))
            pipe.zrem(self._ids_key, str(person.id))
            if name is not None:
                pipe.zrem(self._name_key(name), str(person.id))
            await pipe.execute()

        logger.debug("deleted person %s", person.id)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
