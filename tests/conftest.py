"""Shared test configuration and fixtures."""

import os

# Keep a developer's .env or shell from leaking into the import-time settings
os.environ.setdefault("MASTER_KEY", "env-master-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from jokes_api.app.core.config import Settings
from jokes_api.app.main import create_app
from jokes_api.app.services.joke_service import JokeStore

MASTER_KEY = "test-master-key"

SAMPLE_JOKES = [
    {"id": 1, "jokeText": "A", "jokeType": "Math"},
    {"id": 2, "jokeText": "B", "jokeType": "Food"},
    {"id": 3, "jokeText": "C", "jokeType": "math"},
]


@pytest.fixture
def settings():
    return Settings(master_key=MASTER_KEY, port=3000, public_url="")


@pytest.fixture
def store():
    return JokeStore(SAMPLE_JOKES, master_key=MASTER_KEY)


@pytest.fixture
def app(settings):
    return create_app(settings=settings, jokes=SAMPLE_JOKES)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def joke_store(app):
    """The store owned by the ``app`` fixture."""
    return app.state.joke_store
