# selva/services/resources.py
import logging
from typing import Any, Optional

from selva.core.exceptions import NotFound
from selva.schemas.blog import BLOG_CATEGORIES, BlogPostCreate, BlogPostUpdate
from selva.schemas.notification import NotificationCreate, NotificationUpdate, PushSubscriptionCreate
from selva.schemas.product import ProductCreate, ProductUpdate
from selva.schemas.service import ServiceCreate, ServiceUpdate
from selva.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from selva.services.resource_service import ResourceService, validate_payload
from selva.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

PRODUCT_CATEGORIES = ["Kits", "Equipment", "Gels", "Tools", "Care"]
PRODUCT_BRANDS = ["Selva Pro", "NailTech", "ProTools", "NailCare Plus"]
SERVICE_CATEGORIES = ["Manicure", "Pedicure", "Extensions", "Nail Art", "Repair"]


class ProductService(ResourceService):
    entity = "Product"
    collection_name = "products"
    create_schema = ProductCreate
    update_schema = ProductUpdate
    filter_fields = {"category": "category", "brand": "brand"}
    search_fields = ("name", "description", "tags")
    facets = {"categories": PRODUCT_CATEGORIES, "brands": PRODUCT_BRANDS}


class SalonServiceService(ResourceService):
    entity = "Service"
    collection_name = "services"
    create_schema = ServiceCreate
    update_schema = ServiceUpdate
    filter_fields = {"category": "category"}
    search_fields = ("name", "description")
    facets = {"categories": SERVICE_CATEGORIES}
    view_counter = "views"


class BlogService(ResourceService):
    entity = "Post"
    collection_name = "blog_posts"
    create_schema = BlogPostCreate
    update_schema = BlogPostUpdate
    filter_fields = {"category": "category"}
    search_fields = ("title", "excerpt", "content")
    facets = {"categories": BLOG_CATEGORIES}
    base_filter = {"isPublished": True}
    sort_field = "publishedAt"
    view_counter = "views"

    def prepare(self, doc: dict) -> None:
        if doc.get("publishedAt") is None:
            doc["publishedAt"] = doc["createdAt"]

    async def derive(self, items: list[dict]) -> dict:
        threshold = self.settings.FEATURED_VIEWS_THRESHOLD
        featured = [post for post in items if post.get("views", 0) > threshold]
        return {"featured": featured[: self.settings.FEATURED_LIMIT]}


class TestimonialService(ResourceService):
    entity = "Testimonial"
    collection_name = "testimonials"
    create_schema = TestimonialCreate
    update_schema = TestimonialUpdate
    filter_fields = {"approved": "isApproved", "featured": "isFeatured"}
    boolean_filters = frozenset({"approved", "featured"})
    search_fields = ("customerName", "review", "serviceUsed")
    facets = {"categories": SERVICE_CATEGORIES}
    sort_field = "createdAt"
    defaults = {"isApproved": False, "isFeatured": False}

    async def derive(self, items: list[dict]) -> dict:
        featured = await self.collection.find({"isApproved": True, "isFeatured": True})
        featured.sort(key=lambda t: t["createdAt"], reverse=True)
        return {"featured": featured}

    async def approve(self, item_id: str) -> dict:
        """One-way transition to approved; approving twice is a no-op."""
        item = await self.collection.update(item_id, {"isApproved": True, "updatedAt": utcnow()})
        if item is None:
            raise NotFound(self.not_found_message)
        logger.info("Testimonial approved: %s", item_id)
        return item


class NotificationService(ResourceService):
    entity = "Notification"
    collection_name = "notifications"
    create_schema = NotificationCreate
    update_schema = NotificationUpdate
    filter_fields = {"type": "type", "read": "read"}
    boolean_filters = frozenset({"read"})
    search_fields = ("title", "message")
    sort_field = "createdAt"
    defaults = {"read": False}

    async def derive(self, items: list[dict]) -> dict:
        return {"unreadCount": await self.collection.count({"read": False})}

    async def mark_read(self, item_id: str) -> dict:
        item = await self.collection.update(item_id, {"read": True, "updatedAt": utcnow()})
        if item is None:
            raise NotFound(self.not_found_message)
        return item

    async def subscribe(self, data: Any, user_id: Optional[str] = None) -> dict:
        payload = validate_payload(PushSubscriptionCreate, data)
        doc = {**payload.to_document(), "userId": user_id, "createdAt": utcnow()}
        await self.db["push_subscriptions"].insert(doc)
        logger.info("Push subscription stored (user=%s)", user_id)
        return {"message": "Push notification subscription successful", "success": True}
