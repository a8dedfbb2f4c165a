# selva/db/database.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from selva.core.config import Settings
from selva.db.collection import Collection
from selva.db.memory import MemoryCollection
from selva.db.mongo import MongoCollection

logger = logging.getLogger(__name__)

# collection name -> unique keys
COLLECTIONS = {
    "users": [("email",)],
    "products": [],
    "services": [],
    "blog_posts": [],
    "testimonials": [],
    "notifications": [],
    "push_subscriptions": [],
    "cart_items": [("userId", "productId")],
    "wishlist_items": [("userId", "productId")],
}


class Database:
    def __init__(self, collections: dict[str, Collection], client: Optional[AsyncIOMotorClient] = None):
        self._collections = collections
        self.client = client

    def __getitem__(self, name: str) -> Collection:
        return self._collections[name]

    @property
    def users(self) -> Collection:
        return self._collections["users"]

    async def ensure_indexes(self) -> None:
        for collection in self._collections.values():
            if isinstance(collection, MongoCollection):
                await collection.ensure_indexes()

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def create_memory_database() -> Database:
    return Database({name: MemoryCollection(name, unique) for name, unique in COLLECTIONS.items()})


def create_mongo_database(client: AsyncIOMotorClient, db_name: str) -> Database:
    db = client[db_name]
    return Database(
        {name: MongoCollection(db[name], unique) for name, unique in COLLECTIONS.items()},
        client=client,
    )


def create_database(settings: Settings) -> Database:
    if settings.STORAGE_BACKEND == "memory":
        logger.info("Using in-memory storage")
        return create_memory_database()

    logger.info("Using MongoDB storage (db=%s)", settings.MONGO_DB_NAME)
    client = AsyncIOMotorClient(settings.MONGO_URL, tz_aware=True)
    return create_mongo_database(client, settings.MONGO_DB_NAME)
