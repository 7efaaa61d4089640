"""Shared fixtures for the user cluster API tests."""

import pytest
from fastapi.testclient import TestClient

from user_cluster_api.app.main import create_app
from user_cluster_api.app.schemas.user import create_user
from user_cluster_api.app.services.user_store import UserStore


@pytest.fixture
def store() -> UserStore:
    """A freshly seeded store with users 1, 2 and 3."""
    return UserStore()


@pytest.fixture
def duplicate_store() -> UserStore:
    """A store holding two users with id 3, in a known order."""
    return UserStore(
        [
            create_user(3, "First Three", "first@example.com"),
            create_user(1, "One", "one@example.com"),
            create_user(3, "Second Three", "second@example.com"),
        ]
    )


@pytest.fixture
def client(store: UserStore) -> TestClient:
    return TestClient(create_app(store=store))
