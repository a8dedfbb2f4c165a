# selva/schemas/testimonial.py
from typing import Optional

from pydantic import Field

from selva.schemas.base import CamelModel, NonEmptyStr


class TestimonialCreate(CamelModel):
    # approval and featuring are admin decisions, never client input
    customer_name: NonEmptyStr
    customer_image: Optional[str] = None
    rating: int = Field(..., ge=1, le=5)
    review: NonEmptyStr
    service_used: NonEmptyStr
    before_image: Optional[str] = None
    after_image: Optional[str] = None


class TestimonialUpdate(CamelModel):
    customer_name: Optional[NonEmptyStr] = None
    customer_image: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    review: Optional[NonEmptyStr] = None
    service_used: Optional[NonEmptyStr] = None
    before_image: Optional[str] = None
    after_image: Optional[str] = None
    is_featured: Optional[bool] = None
