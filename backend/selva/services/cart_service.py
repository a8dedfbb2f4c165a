# selva/services/cart_service.py
import logging

from pydantic import ValidationError as PydanticValidationError

from selva.core.exceptions import NotFound, ValidationError
from selva.db.collection import DuplicateKeyError
from selva.db.database import Database
from selva.models.cart_item import CartItem, WishlistItem

logger = logging.getLogger(__name__)


class CartService:
    """
    Per-user cart of (productId, quantity) pairs.

    Items reference products by id only; product details are joined at read
    time and items whose product was deleted are skipped.
    """

    def __init__(self, db: Database):
        self.items = db["cart_items"]
        self.products = db["products"]

    async def _require_product(self, product_id: str) -> dict:
        product = await self.products.get(product_id)
        if product is None:
            raise NotFound("Product not found")
        return product

    async def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> tuple[dict, bool]:
        """Add `quantity` of a product; repeated adds accumulate. Returns (item, created)."""
        try:
            item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        except PydanticValidationError as e:
            raise ValidationError(errors=e.errors(include_url=False, include_context=False))
        await self._require_product(product_id)

        doc = item.to_document()
        cart_item, created = await self.items.upsert_increment(
            {"userId": user_id, "productId": product_id},
            "quantity",
            quantity,
            defaults={"createdAt": doc["createdAt"]},
            fields={"updatedAt": doc["updatedAt"]},
        )
        logger.info("Cart %s: product %s quantity now %s", user_id, product_id, cart_item["quantity"])
        return cart_item, created

    async def list_items(self, user_id: str) -> list[dict]:
        cart = []
        for item in await self.items.find({"userId": user_id}):
            product = await self.products.get(item["productId"])
            if product is None:
                continue
            cart.append({"product": product, "quantity": item["quantity"]})
        return cart

    async def remove_item(self, user_id: str, product_id: str) -> dict:
        if not await self.items.delete_one({"userId": user_id, "productId": product_id}):
            raise NotFound("Item not found in cart")
        return {"message": "Item removed from cart successfully"}

    async def clear(self, user_id: str) -> dict:
        removed = await self.items.delete_many({"userId": user_id})
        return {"message": "Cart cleared", "removed": removed}


class WishlistService:
    def __init__(self, db: Database):
        self.items = db["wishlist_items"]
        self.products = db["products"]

    async def toggle(self, user_id: str, product_id: str) -> dict:
        if await self.products.get(product_id) is None:
            raise NotFound("Product not found")

        match = {"userId": user_id, "productId": product_id}
        if await self.items.delete_one(match):
            return {"productId": product_id, "isInWishlist": False, "message": "Removed from wishlist"}

        try:
            await self.items.insert(WishlistItem(user_id=user_id, product_id=product_id).to_document())
        except DuplicateKeyError:
            pass  # a concurrent toggle already added it
        return {"productId": product_id, "isInWishlist": True, "message": "Added to wishlist"}

    async def list_items(self, user_id: str) -> list[dict]:
        products = []
        for item in await self.items.find({"userId": user_id}):
            product = await self.products.get(item["productId"])
            if product is not None:
                products.append(product)
        return products
