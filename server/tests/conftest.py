"""Shared fixtures for the README backend tests."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from server.adapters.storage import LocalStorageBackend
from server.api import create_app
from server.core.llm import DescriptionGenerator
from server.core.store import DocumentStore


def make_response(*texts):
    """Build an object shaped like an Anthropic Messages API response."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=t) for t in texts])


@pytest.fixture
def store():
    return DocumentStore()


@pytest.fixture
def anthropic_client():
    client = MagicMock()
    client.messages.create.return_value = make_response("A generated description.")
    return client


@pytest.fixture
def generator(anthropic_client):
    return DescriptionGenerator(api_key="test-key", client=anthropic_client, backoff_seconds=(0,))


@pytest.fixture
def media_storage(tmp_path):
    return LocalStorageBackend(tmp_path / "media")


@pytest.fixture
def app(store, media_storage, generator):
    return create_app(store=store, storage=media_storage, generator=generator)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
