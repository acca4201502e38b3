import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)


class ToyDatabase:
    """
    Long-lived MongoDB handle for the toy collection.

    Opened once at application startup and closed at shutdown; request
    handlers reach the collection through `get_toy_collection`.
    """

    def __init__(self, uri: str, db_name: str, collection_name: str):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.client: AsyncIOMotorClient | None = None

    async def connect(self) -> None:
        self.client = AsyncIOMotorClient(
            self.uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        try:
            await self.client.admin.command("ping")
            logger.info("Pinged your deployment. Connected to MongoDB database %s", self.db_name)
        except Exception:
            logger.exception("MongoDB ping failed for database %s", self.db_name)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")

    @property
    def toys(self) -> AsyncIOMotorCollection:
        if self.client is None:
            raise RuntimeError("ToyDatabase is not connected")
        return self.client[self.db_name][self.collection_name]


def get_toy_collection(request: Request) -> AsyncIOMotorCollection:
    return request.app.state.database.toys
