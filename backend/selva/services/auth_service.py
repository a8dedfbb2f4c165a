# selva/services/auth_service.py
import logging
from typing import Any

from selva.core.config import Settings
from selva.core.exceptions import Conflict, Unauthorized
from selva.db.collection import DuplicateKeyError
from selva.db.database import Database
from selva.models.user import User
from selva.schemas.user import LoginSchema, RegisterSchema
from selva.serialize import serialize_user
from selva.services.resource_service import validate_payload
from selva.utils.auth_utils import create_access_token, decode_token
from selva.utils.hash_utils import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Database, settings: Settings):
        self.users = db.users
        self.settings = settings

    def issue_token(self, user: dict) -> str:
        return create_access_token(
            {"userId": user["id"], "email": user["email"], "role": user["role"]},
            self.settings,
        )

    async def register(self, data: Any) -> dict:
        payload = validate_payload(RegisterSchema, data)
        if await self.users.find_one({"email": payload.email}):
            raise Conflict("User already exists")

        user = User(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            phone=payload.phone,
            role="customer",
        )
        try:
            stored = await self.users.insert(user.to_document())
        except DuplicateKeyError:
            raise Conflict("User already exists")

        logger.info("User registered: %s", stored["email"])
        return {"token": self.issue_token(stored), "user": serialize_user(stored)}

    async def login(self, data: Any) -> dict:
        payload = validate_payload(LoginSchema, data)
        user = await self.users.find_one({"email": payload.email})
        if not user or not verify_password(payload.password, user.get("passwordHash", "")):
            raise Unauthorized("Invalid credentials")

        logger.info("User logged in: %s", user["email"])
        return {"token": self.issue_token(user), "user": serialize_user(user)}

    def logout(self) -> dict:
        # Tokens are stateless; nothing to revoke
        return {"message": "Logout successful"}

    def verify_token(self, token: str) -> dict:
        decoded = decode_token(token, self.settings)
        return {"userId": decoded["userId"], "email": decoded.get("email"), "role": decoded.get("role")}

    async def get_user(self, user_id: str) -> dict:
        user = await self.users.get(user_id)
        if not user:
            raise Unauthorized("User not found")
        return serialize_user(user)

    async def ensure_admin(self) -> dict:
        """Create the configured admin account unless a user with that email exists."""
        existing = await self.users.find_one({"email": self.settings.ADMIN_EMAIL})
        if existing:
            return serialize_user(existing)

        admin = User(
            name=self.settings.ADMIN_NAME,
            email=self.settings.ADMIN_EMAIL,
            password_hash=hash_password(self.settings.ADMIN_PASSWORD),
            role="admin",
        )
        try:
            stored = await self.users.insert(admin.to_document())
        except DuplicateKeyError:
            stored = await self.users.find_one({"email": self.settings.ADMIN_EMAIL})
        logger.info("Seeded admin user: %s", stored["email"])
        return serialize_user(stored)
