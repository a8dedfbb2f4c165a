# selva/routes/products.py
from fastapi import APIRouter, Depends, Response

from selva.dependencies import get_cart_service, get_product_service, get_wishlist_service
from selva.middleware.rbac import get_current_user
from selva.routes.resource_routes import register_resource_routes
from selva.schemas.cart import CartItemCreate, WishlistToggle
from selva.services.cart_service import CartService, WishlistService
from selva.services.resources import ProductService

product_router = APIRouter(tags=["Products"])


# ------------------------
# Cart
# ------------------------
@product_router.post("/cart")
async def add_to_cart(
    data: CartItemCreate,
    response: Response,
    user: dict = Depends(get_current_user),
    cart: CartService = Depends(get_cart_service),
):
    item, created = await cart.add_item(user["userId"], data.product_id, data.quantity)
    response.status_code = 201 if created else 200
    return {"message": "Item added to cart successfully", "cartItem": item}


@product_router.get("/cart")
async def get_cart(user: dict = Depends(get_current_user), cart: CartService = Depends(get_cart_service)):
    return {"cart": await cart.list_items(user["userId"])}


@product_router.delete("/cart")
async def clear_cart(user: dict = Depends(get_current_user), cart: CartService = Depends(get_cart_service)):
    return await cart.clear(user["userId"])


@product_router.delete("/cart/{product_id}")
async def remove_from_cart(
    product_id: str,
    user: dict = Depends(get_current_user),
    cart: CartService = Depends(get_cart_service),
):
    return await cart.remove_item(user["userId"], product_id)


# ------------------------
# Wishlist
# ------------------------
@product_router.post("/wishlist")
async def toggle_wishlist(
    data: WishlistToggle,
    user: dict = Depends(get_current_user),
    wishlist: WishlistService = Depends(get_wishlist_service),
):
    return await wishlist.toggle(user["userId"], data.product_id)


@product_router.get("/wishlist")
async def get_wishlist(
    user: dict = Depends(get_current_user),
    wishlist: WishlistService = Depends(get_wishlist_service),
):
    return {"wishlist": await wishlist.list_items(user["userId"])}


# ------------------------
# Catalog CRUD
# ------------------------
register_resource_routes(product_router, ProductService, get_product_service)
