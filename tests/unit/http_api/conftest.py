from unittest import mock

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer
from http_api.client import factory

from db.mongo_connector import MongoConnector


@pytest.fixture
def connector():
    connector = mock.create_autospec(MongoConnector, instance=True)
    connector.ping.return_value = True
    return connector


@pytest_asyncio.fixture
async def client(config, connector, service):
    app = factory.create_app(config, connector=connector, service=service)
    async with TestClient(TestServer(app)) as client:
        yield client


@pytest.fixture
def auth_headers(config) -> dict:
    return {"Authorization": f"Bearer {config.token_secret}"}
