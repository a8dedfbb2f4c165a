# selva/schemas/user.py
from pydantic import BaseModel, EmailStr, Field

from selva.schemas.base import NonEmptyStr


class RegisterSchema(BaseModel):
    name: NonEmptyStr
    email: EmailStr
    password: str = Field(..., min_length=6)
    phone: NonEmptyStr


class LoginSchema(BaseModel):
    email: EmailStr
    password: NonEmptyStr
