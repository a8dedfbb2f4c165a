# selva/db/mongo.py
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from selva.db.collection import Collection, DuplicateKeyError, new_id

# Documents carry their own string `id`; Mongo's ObjectId never leaves the store
PROJECTION = {"_id": 0}


class MongoCollection(Collection):
    """Collection backed by a motor collection, using Mongo's per-document atomic operators."""

    def __init__(self, collection: AsyncIOMotorCollection, unique=()):
        super().__init__(collection.name, unique)
        self._collection = collection

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("id", unique=True)
        for key in self.unique:
            await self._collection.create_index([(field, ASCENDING) for field in key], unique=True)

    async def find(self, match=None) -> list[dict]:
        cursor = self._collection.find(match or {}, PROJECTION).sort("_id", ASCENDING)
        return await cursor.to_list(length=None)

    async def find_one(self, match) -> Optional[dict]:
        return await self._collection.find_one(match, PROJECTION)

    async def insert(self, doc) -> dict:
        stored = {**doc}
        stored.setdefault("id", new_id())
        try:
            await self._collection.insert_one(stored)
        except MongoDuplicateKeyError as exc:
            raise DuplicateKeyError(str(exc)) from exc
        stored.pop("_id", None)
        return stored

    async def update(self, doc_id, fields) -> Optional[dict]:
        fields = {key: value for key, value in fields.items() if key != "id"}
        if not fields:
            return await self.get(doc_id)
        try:
            return await self._collection.find_one_and_update(
                {"id": doc_id},
                {"$set": fields},
                projection=PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
        except MongoDuplicateKeyError as exc:
            raise DuplicateKeyError(str(exc)) from exc

    async def increment(self, match, field, amount=1, fields=None) -> Optional[dict]:
        update: dict[str, Any] = {"$inc": {field: amount}}
        if fields:
            update["$set"] = fields
        return await self._collection.find_one_and_update(
            match,
            update,
            projection=PROJECTION,
            return_document=ReturnDocument.AFTER,
        )

    async def upsert_increment(self, match, field, amount, defaults, fields=None):
        update: dict[str, Any] = {
            "$inc": {field: amount},
            "$setOnInsert": {**defaults, "id": new_id()},
        }
        if fields:
            update["$set"] = fields
        try:
            before = await self._upsert(match, update)
        except MongoDuplicateKeyError:
            # A concurrent upsert inserted first; the retry takes the $inc branch
            before = await self._upsert(match, update)
        doc = await self.find_one(match)
        return doc, before is None

    async def _upsert(self, match, update) -> Optional[dict]:
        return await self._collection.find_one_and_update(
            match,
            update,
            projection=PROJECTION,
            upsert=True,
            return_document=ReturnDocument.BEFORE,
        )

    async def delete_one(self, match) -> bool:
        result = await self._collection.delete_one(match)
        return result.deleted_count > 0

    async def delete_many(self, match) -> int:
        result = await self._collection.delete_many(match)
        return result.deleted_count

    async def count(self, match=None) -> int:
        return await self._collection.count_documents(match or {})
