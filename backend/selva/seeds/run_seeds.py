# selva/seeds/run_seeds.py
import asyncio
import logging

from selva.core.config import Settings, get_settings
from selva.db.database import Database, create_database
from selva.seeds.seed_notifications import seed_notifications
from selva.seeds.seed_products import seed_products
from selva.seeds.seed_services import seed_services
from selva.seeds.seed_testimonials import seed_testimonials
from selva.services.auth_service import AuthService

logger = logging.getLogger(__name__)


async def run_seeds(db: Database, settings: Settings, catalog: bool = True) -> None:
    """Always ensure the admin account; seed the catalog into empty collections."""
    await AuthService(db, settings).ensure_admin()
    if not catalog:
        return
    await seed_products(db)
    await seed_services(db)
    await seed_testimonials(db)
    await seed_notifications(db)


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    db = create_database(settings)
    try:
        await db.ensure_indexes()
        await run_seeds(db, settings)
    finally:
        db.close()
    logger.info("All seeders completed!")


if __name__ == "__main__":
    asyncio.run(main())
