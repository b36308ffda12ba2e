from __future__ import annotations

from typing import Optional

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

import constants
from config import settings

logger = structlog.getLogger(__name__)


class MongoConnector:
    """A simple connector for pymongo's asyncio client."""

    __slots__ = "uri", "db_name", "client", "initialized"

    def __init__(self, uri: str, db_name: str, client: AsyncMongoClient = None):
        self.uri = uri
        self.db_name = db_name
        self.client: AsyncMongoClient = client or create_client(uri)
        self.initialized = False

    def __repr__(self):
        db_name, initialized = self.db_name, self.initialized
        return f"<{self.__class__.__name__} {db_name=} {initialized=}>"

    async def initialize(self):
        if not self.initialized:
            await self.client.aconnect()
            self.initialized = True
            logger.info("Connected to MongoDB", db_name=self.db_name)

    @property
    def database(self) -> AsyncDatabase:
        return self.client[self.db_name]

    def collection(self, name: str) -> AsyncCollection:
        return self.database[name]

    async def ping(self) -> bool:
        await self.database.command("ping")
        return True

    async def close(self):
        try:
            await self.client.close()
        finally:
            self.initialized = False


def create_client(uri: str, **kwargs) -> AsyncMongoClient:
    kwargs.setdefault("appname", constants.APP_NAME)
    kwargs.setdefault("serverSelectionTimeoutMS", 5000)
    kwargs.setdefault("tz_aware", True)
    return AsyncMongoClient(uri, **kwargs)


def from_config(config: settings.Config) -> MongoConnector:
    return MongoConnector(config.mongo_uri, config.db_name)
