# selva/seeds/helpers.py
import logging

from selva.db.collection import Collection
from selva.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


async def seed_collection(collection: Collection, docs: list[dict]) -> int:
    """Insert `docs` into an empty collection; existing data is left alone."""
    if await collection.count():
        logger.info("%s already populated, skipping seed", collection.name)
        return 0
    now = utcnow()
    for doc in docs:
        doc.setdefault("createdAt", now)
        doc.setdefault("updatedAt", doc["createdAt"])
    await collection.insert_many(docs)
    logger.info("%s seeded with %d documents", collection.name, len(docs))
    return len(docs)
