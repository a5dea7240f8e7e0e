"""
Tests for the app lifespan when it builds its own Redis store.
"""

import logging

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from fastapi.testclient import TestClient

from people_api.api.app import create_app
from people_api.repositories import redis_repository
from people_api.repositories.redis_repository import RedisPersonRepository


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def closed(monkeypatch):
    """Record every RedisPersonRepository.close call."""
    calls = []
    original = RedisPersonRepository.close

    async def close(self):
        calls.append(self)
        await original(self)

    monkeypatch.setattr(RedisPersonRepository, "close", close)
    return calls


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch, server):
    monkeypatch.setattr(
        redis_repository,
        "get_redis_client",
        lambda: FakeAsyncRedis(server=server, decode_responses=True),
    )


def test_default_app_uses_redis_store(closed):
    """Test that create_app() wires a Redis store and closes it on shutdown."""
    app = create_app()
    with TestClient(app) as client:
        assert isinstance(app.state.repository, RedisPersonRepository)

        saved = client.post("/api/people", json={"name": "Name"}).json()
        assert client.get(f"/api/people/{saved['id']}").json() == saved
        assert client.get("/health").status_code == 200
        assert closed == []

    assert len(closed) == 1
    assert not hasattr(app.state, "repository")
    assert not hasattr(app.state, "person_handler")


def test_unreachable_redis_logs_warning_on_startup(server, closed, caplog):
    """Test that startup still succeeds but warns when Redis is down."""
    server.connected = False
    with caplog.at_level(logging.WARNING, logger="people_api"):
        with TestClient(create_app()) as client:
            assert client.get("/health").status_code == 503

    assert "Redis is not reachable yet" in caplog.text
    assert len(closed) == 1
