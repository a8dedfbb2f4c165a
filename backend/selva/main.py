# selva/main.py
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from selva.core.config import Settings, get_settings
from selva.core.error_handlers import register_exception_handlers
from selva.db.database import Database, create_database
from selva.routes.auth import auth_router
from selva.routes.blog import blog_router
from selva.routes.health import health_router
from selva.routes.notifications import notification_router
from selva.routes.products import product_router
from selva.routes.services import service_router
from selva.routes.testimonials import testimonial_router
from selva.seeds.run_seeds import run_seeds
from selva.services.auth_service import AuthService
from selva.services.cart_service import CartService, WishlistService
from selva.services.resources import (
    BlogService,
    NotificationService,
    ProductService,
    SalonServiceService,
    TestimonialService,
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    db = db or create_database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await db.ensure_indexes()
            await run_seeds(db, settings, catalog=settings.SEED_ON_STARTUP)
            logger.info("Selva API started (env=%s, storage=%s)", settings.APP_ENV, settings.STORAGE_BACKEND)
        except Exception as e:
            logger.error("Startup failed: %s", e)
            raise
        yield
        db.close()

    # ------------------------
    # App init
    # ------------------------
    app = FastAPI(title="Selva Nail Salon API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.started_at = time.monotonic()

    # ------------------------
    # Services
    # ------------------------
    app.state.auth_service = AuthService(db, settings)
    app.state.product_service = ProductService(db, settings)
    app.state.salon_service_service = SalonServiceService(db, settings)
    app.state.blog_service = BlogService(db, settings)
    app.state.testimonial_service = TestimonialService(db, settings)
    app.state.notification_service = NotificationService(db, settings)
    app.state.cart_service = CartService(db)
    app.state.wishlist_service = WishlistService(db)

    # ------------------------
    # CORS
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(product_router, prefix="/api/products")
    app.include_router(service_router, prefix="/api/services")
    app.include_router(blog_router, prefix="/api/blog")
    app.include_router(testimonial_router, prefix="/api/testimonials")
    app.include_router(notification_router, prefix="/api/notifications")
    app.include_router(health_router)

    # ------------------------
    # Exception handlers
    # ------------------------
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Selva Nail Salon API"}

    return app


app = create_app()
