"""
pytest fixtures for the movies API test suite.

Every test gets its own store and application so state never leaks
between tests.
"""

import pytest
from fastapi.testclient import TestClient

from movies_crud_api.app.main import create_app
from movies_crud_api.app.services.movie_service import MovieStore


@pytest.fixture
def store() -> MovieStore:
    movie_store = MovieStore()
    movie_store.seed_demo_data()
    return movie_store


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
