# selva/db/memory.py
import asyncio
import copy
from typing import Any, Optional

from selva.db.collection import Collection, DuplicateKeyError, new_id


def _matches(doc: dict, match: Optional[dict[str, Any]]) -> bool:
    if not match:
        return True
    return all(doc.get(key) == value for key, value in match.items())


class MemoryCollection(Collection):
    """In-process collection. Mutations are serialised behind one asyncio.Lock."""

    def __init__(self, name: str, unique=()):
        super().__init__(name, unique)
        self._docs: dict[str, dict] = {}
        self._lock = asyncio.Lock()

    def _check_unique(self, doc: dict, ignore_id: Optional[str] = None) -> None:
        for key in self.unique:
            value = tuple(doc.get(field) for field in key)
            for other in self._docs.values():
                if other["id"] == ignore_id:
                    continue
                if tuple(other.get(field) for field in key) == value:
                    raise DuplicateKeyError(f"{self.name}: duplicate {'/'.join(key)}")

    def _first(self, match: dict[str, Any]) -> Optional[dict]:
        return next((doc for doc in self._docs.values() if _matches(doc, match)), None)

    async def find(self, match=None) -> list[dict]:
        return [copy.deepcopy(doc) for doc in self._docs.values() if _matches(doc, match)]

    async def find_one(self, match) -> Optional[dict]:
        doc = self._first(match)
        return copy.deepcopy(doc) if doc is not None else None

    async def insert(self, doc) -> dict:
        stored = copy.deepcopy(doc)
        stored.setdefault("id", new_id())
        async with self._lock:
            if stored["id"] in self._docs:
                raise DuplicateKeyError(f"{self.name}: duplicate id {stored['id']}")
            self._check_unique(stored)
            self._docs[stored["id"]] = stored
        return copy.deepcopy(stored)

    async def update(self, doc_id, fields) -> Optional[dict]:
        async with self._lock:
            doc = self._docs.get(doc_id)
            if doc is None:
                return None
            merged = {**doc, **copy.deepcopy(fields), "id": doc_id}
            self._check_unique(merged, ignore_id=doc_id)
            self._docs[doc_id] = merged
            return copy.deepcopy(merged)

    async def increment(self, match, field, amount=1, fields=None) -> Optional[dict]:
        async with self._lock:
            doc = self._first(match)
            if doc is None:
                return None
            doc[field] = doc.get(field, 0) + amount
            if fields:
                doc.update(copy.deepcopy(fields))
            return copy.deepcopy(doc)

    async def upsert_increment(self, match, field, amount, defaults, fields=None):
        async with self._lock:
            doc = self._first(match)
            if doc is not None:
                doc[field] = doc.get(field, 0) + amount
                if fields:
                    doc.update(copy.deepcopy(fields))
                return copy.deepcopy(doc), False
            stored = {"id": new_id(), **copy.deepcopy(defaults), **match, field: amount}
            if fields:
                stored.update(copy.deepcopy(fields))
            self._check_unique(stored)
            self._docs[stored["id"]] = stored
            return copy.deepcopy(stored), True

    async def delete_one(self, match) -> bool:
        async with self._lock:
            doc = self._first(match)
            if doc is None:
                return False
            del self._docs[doc["id"]]
            return True

    async def delete_many(self, match) -> int:
        async with self._lock:
            doomed = [doc_id for doc_id, doc in self._docs.items() if _matches(doc, match)]
            for doc_id in doomed:
                del self._docs[doc_id]
            return len(doomed)

    async def count(self, match=None) -> int:
        return sum(1 for doc in self._docs.values() if _matches(doc, match))
