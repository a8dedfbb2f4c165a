# selva/schemas/cart.py
from pydantic import Field

from selva.schemas.base import CamelModel, NonEmptyStr


class CartItemCreate(CamelModel):
    product_id: NonEmptyStr
    quantity: int = Field(1, ge=1)


class WishlistToggle(CamelModel):
    product_id: NonEmptyStr
