# selva/schemas/product.py
from typing import List, Optional

from pydantic import Field

from selva.schemas.base import CamelModel, NonEmptyStr


class ProductCreate(CamelModel):
    name: NonEmptyStr
    description: NonEmptyStr
    price: float = Field(..., ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    images: List[str] = []
    category: NonEmptyStr
    brand: NonEmptyStr
    in_stock: bool = True
    stock_quantity: int = Field(..., ge=0)
    rating: float = Field(0, ge=0, le=5)
    reviews: int = Field(0, ge=0)
    tags: List[str] = []
    is_new: bool = False
    is_featured: bool = False


class ProductUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    price: Optional[float] = Field(None, ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    images: Optional[List[str]] = None
    category: Optional[NonEmptyStr] = None
    brand: Optional[NonEmptyStr] = None
    in_stock: Optional[bool] = None
    stock_quantity: Optional[int] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviews: Optional[int] = Field(None, ge=0)
    tags: Optional[List[str]] = None
    is_new: Optional[bool] = None
    is_featured: Optional[bool] = None
