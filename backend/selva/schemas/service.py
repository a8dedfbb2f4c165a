# selva/schemas/service.py
from typing import List, Optional

from pydantic import Field

from selva.schemas.base import CamelModel, NonEmptyStr


class ServiceCreate(CamelModel):
    name: NonEmptyStr
    description: NonEmptyStr
    price: float = Field(..., ge=0)
    duration: int = Field(..., gt=0)  # minutes
    image: Optional[str] = None
    category: NonEmptyStr
    features: List[str] = []
    is_popular: bool = False


class ServiceUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[int] = Field(None, gt=0)
    image: Optional[str] = None
    category: Optional[NonEmptyStr] = None
    features: Optional[List[str]] = None
    is_popular: Optional[bool] = None
