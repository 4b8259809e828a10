import uuid

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.config import Settings
from app.db.mongo import get_users_collection
from app.main import create_app


@pytest.fixture
def test_settings():
    # Unique database per test so in-memory data never leaks between tests
    return Settings(
        ENVIRONMENT="development",
        MONGODB_DB_NAME=f"test_{uuid.uuid4().hex}",
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def users_collection(mongo_client, test_settings):
    return get_users_collection(mongo_client, test_settings)


@pytest.fixture
def app(test_settings, mongo_client):
    return create_app(test_settings, client=mongo_client)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def created_user(client):
    response = client.post("/user", json={"name": "A", "email": "a@x.com"})
    assert response.status_code == 201
    return response.json()
