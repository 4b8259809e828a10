import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ServerSelectionTimeoutError

from app.core.config import Settings
from app.core.logging import DevelopmentFormatter
from app.db.mongo import (
    check_database_health,
    close_mongo_connection,
    connect_to_mongo,
    create_mongo_client,
    get_users_collection,
)
from app.main import create_app


def make_client(ping_side_effect=None):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1}, side_effect=ping_side_effect)
    return client


def test_create_mongo_client_does_not_connect():
    client = create_mongo_client(Settings(MONGODB_URL="mongodb://db.invalid:27017"))
    try:
        assert isinstance(client, AsyncIOMotorClient)
    finally:
        client.close()


def test_get_users_collection_uses_configured_names():
    client = MagicMock()
    settings = Settings(MONGODB_DB_NAME="people", MONGODB_COLLECTION="accounts")

    collection = get_users_collection(client, settings)

    client.__getitem__.assert_called_once_with("people")
    database = client.__getitem__.return_value
    database.__getitem__.assert_called_once_with("accounts")
    assert collection is database.__getitem__.return_value


@pytest.mark.asyncio
async def test_connect_retries_then_succeeds():
    client = make_client([ServerSelectionTimeoutError("down"), {"ok": 1}])

    with patch("app.db.mongo.asyncio.sleep", new=AsyncMock()) as sleep:
        await connect_to_mongo(client, retries=3, retry_delay=1)

    assert client.admin.command.await_count == 2
    sleep.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_connect_gives_up_after_retries():
    client = make_client(ServerSelectionTimeoutError("down"))

    with patch("app.db.mongo.asyncio.sleep", new=AsyncMock()) as sleep:
        with pytest.raises(ConnectionError):
            await connect_to_mongo(client, retries=3, retry_delay=1)

    assert client.admin.command.await_count == 3
    assert [c.args[0] for c in sleep.await_args_list] == [1, 2]


@pytest.mark.asyncio
async def test_health_check():
    assert await check_database_health(make_client()) is True
    assert await check_database_health(make_client(ServerSelectionTimeoutError("down"))) is False
    assert await check_database_health(None) is False


def test_close_mongo_connection():
    client = MagicMock()
    close_mongo_connection(client)
    client.close.assert_called_once_with()
    close_mongo_connection(None)


def test_lifespan_pings_on_startup_and_closes_on_shutdown():
    client = make_client()
    app = create_app(Settings(ENVIRONMENT="development"), client=client)
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level

    try:
        with TestClient(app) as test_client:
            client.admin.command.assert_awaited_with("ping")
            assert test_client.get("/live").json() == {"status": "alive"}
            assert isinstance(root.handlers[0].formatter, DevelopmentFormatter)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)

    client.close.assert_called_once_with()


def test_health_endpoints_report_database_state():
    client = make_client()
    app = create_app(Settings(), client=client)
    test_client = TestClient(app)

    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "healthy"
    assert test_client.get("/ready").json() == {"status": "ready"}

    client.admin.command.side_effect = ServerSelectionTimeoutError("down")

    response = test_client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert test_client.get("/ready").status_code == 503


def test_root_reports_service_info(client):
    data = client.get("/").json()

    assert data["status"] == "running"
    assert data["environment"] == "development"
