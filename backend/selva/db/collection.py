# selva/db/collection.py
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional
from uuid import uuid4


class DuplicateKeyError(Exception):
    """Raised when an insert violates a unique key of the collection."""


def new_id() -> str:
    return uuid4().hex


class Collection(ABC):
    """
    Storage port shared by every service.

    Documents are plain dicts keyed by a string `id`. Ids are generated on
    insert and never reused. Every mutation is atomic per document.
    """

    def __init__(self, name: str, unique: Iterable[tuple[str, ...]] = ()):
        self.name = name
        self.unique = [tuple(key) for key in unique]

    @abstractmethod
    async def find(self, match: Optional[dict[str, Any]] = None) -> list[dict]:
        """Documents whose fields equal every value in `match`, in insertion order."""

    @abstractmethod
    async def find_one(self, match: dict[str, Any]) -> Optional[dict]:
        ...

    async def get(self, doc_id: str) -> Optional[dict]:
        return await self.find_one({"id": doc_id})

    @abstractmethod
    async def insert(self, doc: dict[str, Any]) -> dict:
        """Store `doc`, assigning an id if it has none. Returns the stored copy."""

    async def insert_many(self, docs: Iterable[dict[str, Any]]) -> list[dict]:
        return [await self.insert(doc) for doc in docs]

    @abstractmethod
    async def update(self, doc_id: str, fields: dict[str, Any]) -> Optional[dict]:
        """Shallow-merge `fields` into the document. None if it does not exist."""

    @abstractmethod
    async def increment(
        self,
        match: dict[str, Any],
        field: str,
        amount: int = 1,
        fields: Optional[dict[str, Any]] = None,
    ) -> Optional[dict]:
        """Atomically add `amount` to `field` of the first matching document."""

    @abstractmethod
    async def upsert_increment(
        self,
        match: dict[str, Any],
        field: str,
        amount: int,
        defaults: dict[str, Any],
        fields: Optional[dict[str, Any]] = None,
    ) -> tuple[dict, bool]:
        """
        Atomically add `amount` to `field` of the document matching `match`,
        or insert `match | defaults | {field: amount}` when none exists.

        Returns the resulting document and whether it was inserted.
        """

    @abstractmethod
    async def delete_one(self, match: dict[str, Any]) -> bool:
        ...

    async def delete(self, doc_id: str) -> bool:
        return await self.delete_one({"id": doc_id})

    @abstractmethod
    async def delete_many(self, match: dict[str, Any]) -> int:
        ...

    @abstractmethod
    async def count(self, match: Optional[dict[str, Any]] = None) -> int:
        ...
