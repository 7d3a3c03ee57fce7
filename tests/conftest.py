"""Shared test fixtures for pytest.

ENVIRONMENT is forced to ``test`` before any settings are read so a local
.env file cannot leak a real API key or production logging into the run.
"""

import os
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient


os.environ["ENVIRONMENT"] = "test"

from core.config import Settings, get_settings
from main import create_app


get_settings.cache_clear()


class FakeTextGenerator:
    """Deterministic stand-in for the Gemini generator that records calls."""

    def __init__(self, text: str = "Hi there", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, model: str, contents: str) -> str:
        self.calls.append((model, contents))
        if self.error is not None:
            raise self.error
        return self.text


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"ENVIRONMENT": "test", "GEMINI_API_KEY": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def client_factory(
    settings: Settings,
) -> Generator[Callable[..., TestClient], None, None]:
    """Build clients around a given generator; lifespan runs on entry."""
    clients: list[TestClient] = []

    def _make(generator: object | None = None, **overrides: object) -> TestClient:
        app_settings = make_settings(**overrides) if overrides else settings
        client = TestClient(create_app(app_settings, text_generator=generator))  # type: ignore[arg-type]
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(
    client_factory: Callable[..., TestClient], fake_generator: FakeTextGenerator
) -> TestClient:
    """
    Create a test client wired to the fake generator.
    """
    return client_factory(fake_generator)
