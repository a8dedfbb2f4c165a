# selva/models/cart_item.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from selva.schemas.base import CamelModel
from selva.utils.time_utils import utcnow


class CartItem(CamelModel):
    id: Optional[str] = None
    user_id: str
    product_id: str
    quantity: int = Field(..., ge=1)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class WishlistItem(CamelModel):
    id: Optional[str] = None
    user_id: str
    product_id: str
    created_at: datetime = Field(default_factory=utcnow)
