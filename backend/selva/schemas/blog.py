# selva/schemas/blog.py
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from selva.schemas.base import CamelModel, NonEmptyStr

BLOG_CATEGORIES = ["Nail Care", "Trends", "Tips & Tricks", "DIY", "Product Reviews"]

BlogCategory = Literal["Nail Care", "Trends", "Tips & Tricks", "DIY", "Product Reviews"]


def _assume_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BlogPostCreate(CamelModel):
    title: NonEmptyStr
    content: NonEmptyStr
    excerpt: NonEmptyStr
    featured_image: Optional[str] = None
    author: NonEmptyStr
    category: BlogCategory
    tags: List[str] = []
    is_published: bool = False
    published_at: Optional[datetime] = None
    likes: int = Field(0, ge=0)

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return _assume_utc(v)


class BlogPostUpdate(CamelModel):
    title: Optional[NonEmptyStr] = None
    content: Optional[NonEmptyStr] = None
    excerpt: Optional[NonEmptyStr] = None
    featured_image: Optional[str] = None
    author: Optional[NonEmptyStr] = None
    category: Optional[BlogCategory] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None
    published_at: Optional[datetime] = None
    likes: Optional[int] = Field(None, ge=0)

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return _assume_utc(v)
