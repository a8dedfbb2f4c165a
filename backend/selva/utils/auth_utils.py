# selva/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from selva.core.config import Settings
from selva.core.exceptions import Unauthorized

logger = logging.getLogger(__name__)

TOKEN_TYPE = "access"


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Sign `data` ({userId, email, role}) into a bearer token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode.update({
        "exp": expire,
        "type": TOKEN_TYPE,
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str, settings: Settings) -> dict:
    try:
        decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.debug("Rejected expired token")
        raise Unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected invalid token: %s", e)
        raise Unauthorized("Invalid token")

    if decoded.get("type") != TOKEN_TYPE:
        raise Unauthorized(f"Invalid token type: expected {TOKEN_TYPE}")
    if not decoded.get("userId"):
        raise Unauthorized("Invalid token")
    return decoded
