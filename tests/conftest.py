"""Shared pytest fixtures for the social graph tests."""

import pytest
from fastapi.testclient import TestClient

from social_graph_api.app.core.config import Settings
from social_graph_api.app.main import create_app
from social_graph_api.app.services.user_graph import UserGraphStore


@pytest.fixture
def store() -> UserGraphStore:
    """A fresh store with the default friendship policy."""
    return UserGraphStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(language="ru", api_prefix="")


@pytest.fixture
def client(settings: Settings, store: UserGraphStore) -> TestClient:
    """Test client for an application serving ``store``."""
    return TestClient(create_app(settings=settings, store=store))
