"""Shared fixtures for the people API tests."""

from collections.abc import AsyncIterator

import pytest
from fastapi.testclient import TestClient

from people_api.api.app import create_app
from people_api.entities import PersonEntity


class FakePersonStore:
    """In-memory PersonStore that records the calls it receives."""

    def __init__(self, people: list[PersonEntity] | None = None) -> None:
        self.people: dict[int, PersonEntity] = {p.id: p for p in people or [] if p.id is not None}
        self.calls: list[tuple[str, object]] = []
        self.healthy = True
        self._next_id = max(self.people, default=0) + 1

    async def find_all(self) -> AsyncIterator[PersonEntity]:
        self.calls.append(("find_all", None))
        for person in list(self.people.values()):
            yield person

    async def find_by_id(self, person_id: int) -> PersonEntity | None:
        self.calls.append(("find_by_id", person_id))
        return self.people.get(person_id)

    async def find_first_by_name(self, name: str) -> PersonEntity | None:
        self.calls.append(("find_first_by_name", name))
        return next((p for p in self.people.values() if p.name == name), None)

    async def save(self, person: PersonEntity) -> PersonEntity:
        self.calls.append(("save", person))
        person_id = person.id
        if person_id is None:
            person_id = self._next_id
            self._next_id += 1
        saved = PersonEntity(id=person_id, name=person.name)
        self.people[person_id] = saved
        return saved

    async def delete(self, person: PersonEntity) -> None:
        self.calls.append(("delete", person))
        self.people.pop(person.id, None)

    async def health_check(self) -> bool:
        return self.healthy

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)


@pytest.fixture
def store():
    """Fake store seeded with two people."""
    return FakePersonStore(
        [
            PersonEntity(id=1, name="Name"),
            PersonEntity(id=2, name="Sabo"),
        ]
    )


@pytest.fixture
def client(store):
    """Create a test client bound to the fake store."""
    with TestClient(create_app(repository=store)) as test_client:
        yield test_client
