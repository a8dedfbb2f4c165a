# selva/models/user.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from selva.schemas.base import CamelModel
from selva.utils.time_utils import utcnow

Role = Literal["customer", "admin"]


class User(CamelModel):
    id: Optional[str] = None
    name: str
    email: EmailStr
    password_hash: str
    phone: Optional[str] = None
    role: Role = "customer"
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
