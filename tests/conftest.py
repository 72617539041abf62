from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"

    # Ensure local .env cannot point tests at a real gateway or database.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["OPENROUTER_API_KEY"] = ""


class FakeLLM:
    """Replays queued replies; with nothing queued it behaves like a gateway without an API key.

    A queued exception is raised instead of returned.
    """

    def __init__(self) -> None:
        self.replies: list[str | Exception] = []
        self.prompts: list[str] = []

    def queue(self, *replies: str | Exception) -> None:
        self.replies.extend(replies)

    def complete(self, prompt: str, *, max_tokens: int, temperature: float = 0.7) -> str:
        from skillgap.services.llm_client import LLMUnavailableError

        self.prompts.append(prompt)
        if not self.replies:
            raise LLMUnavailableError("no reply queued")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> Any:
    from skillgap.services.cache import CacheStore

    return CacheStore(maxsize=64, timer=clock)


@pytest.fixture()
def client(fake_llm: FakeLLM, cache: Any) -> Any:
    from skillgap.database import Base, engine
    from skillgap.main import create_app
    from skillgap.routers.dependencies import get_cache, get_llm_client

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded_client(client: Any) -> Any:
    resp = client.post("/api/seed")
    assert resp.status_code == 200
    return client
