# selva/services/resource_service.py
"""
Generic list/detail/mutate pattern shared by every catalog collection.

A subclass declares what differs per entity (collection, schemas, filters,
search fields, facets, ordering, view counter, server-side defaults) and
optionally overrides `derive` to add computed lists to `list()` results.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from selva.core.config import Settings
from selva.core.exceptions import NotFound, ValidationError
from selva.db.database import Database
from selva.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

NO_FILTER = ("", "all")
EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def validate_payload(schema: type[BaseModel], data: Any) -> BaseModel:
    """Validate `data` against `schema`, mapping failures onto ValidationError."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(errors=e.errors(include_url=False, include_context=False))


def parse_bool(param: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    raise ValidationError(errors=[{"loc": ["query", param], "msg": "must be 'true' or 'false'"}])


def _sort_key(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value if value is not None else EPOCH


class ResourceService:
    entity: ClassVar[str] = "Resource"
    collection_name: ClassVar[str]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]

    # query parameter -> document field (equality match, "all" disables)
    filter_fields: ClassVar[dict[str, str]] = {}
    # query parameters parsed as "true"/"false"
    boolean_filters: ClassVar[frozenset] = frozenset()
    search_fields: ClassVar[tuple[str, ...]] = ()
    facets: ClassVar[dict[str, list[str]]] = {}
    # applied to list() and get_by_id()
    base_filter: ClassVar[dict[str, Any]] = {}
    sort_field: ClassVar[Optional[str]] = None
    # field incremented on every get_by_id()
    view_counter: ClassVar[Optional[str]] = None
    # server-side fields forced on create
    defaults: ClassVar[dict[str, Any]] = {}

    def __init__(self, db: Database, settings: Settings):
        self.db = db
        self.settings = settings
        self.collection = db[self.collection_name]

    @property
    def not_found_message(self) -> str:
        return f"{self.entity} not found"

    # ------------------------
    # Queries
    # ------------------------
    async def list(self, filters: Optional[Mapping[str, Any]] = None, limit: Optional[int] = None) -> dict:
        filters = filters or {}
        if limit is not None and limit < 1:
            raise ValidationError(errors=[{"loc": ["query", "limit"], "msg": "must be a positive integer"}])

        match = dict(self.base_filter)
        for param, field in self.filter_fields.items():
            value = filters.get(param)
            if value is None or value in NO_FILTER:
                continue
            match[field] = parse_bool(param, value) if param in self.boolean_filters else value

        items = await self.collection.find(match)

        search = (filters.get("search") or "").strip().lower()
        if search:
            items = [item for item in items if self._matches_search(item, search)]

        if self.sort_field:
            items.sort(key=lambda item: _sort_key(item.get(self.sort_field)), reverse=True)
        if limit is not None:
            items = items[:limit]

        result = {
            "items": items,
            "facets": {name: list(values) for name, values in self.facets.items()},
        }
        result.update(await self.derive(items))
        return result

    def _matches_search(self, item: dict, term: str) -> bool:
        for field in self.search_fields:
            value = item.get(field)
            if isinstance(value, str) and term in value.lower():
                return True
            if isinstance(value, list) and any(isinstance(v, str) and term in v.lower() for v in value):
                return True
        return False

    async def derive(self, items: list[dict]) -> dict:
        """Computed lists added to every list() result. Recomputed on each call."""
        return {}

    async def get_by_id(self, item_id: str) -> dict:
        match = {"id": item_id, **self.base_filter}
        if self.view_counter:
            item = await self.collection.increment(match, self.view_counter, 1)
        else:
            item = await self.collection.find_one(match)
        if item is None:
            raise NotFound(self.not_found_message)
        return item

    # ------------------------
    # Mutations
    # ------------------------
    async def create(self, data: Any) -> dict:
        payload = validate_payload(self.create_schema, data)
        doc = payload.to_document()
        doc.update(self.defaults)
        if self.view_counter:
            doc[self.view_counter] = 0
        now = utcnow()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        self.prepare(doc)

        item = await self.collection.insert(doc)
        logger.info("%s created: %s", self.entity, item["id"])
        return item

    def prepare(self, doc: dict) -> None:
        """Hook for entity-specific defaults derived at create time."""

    async def update(self, item_id: str, data: Any) -> dict:
        payload = validate_payload(self.update_schema, data)
        fields = payload.to_document(partial=True)
        fields["updatedAt"] = utcnow()

        item = await self.collection.update(item_id, fields)
        if item is None:
            raise NotFound(self.not_found_message)
        return item

    async def delete(self, item_id: str) -> dict:
        if not await self.collection.delete(item_id):
            raise NotFound(self.not_found_message)
        logger.info("%s deleted: %s", self.entity, item_id)
        return {"message": f"{self.entity} deleted successfully"}
