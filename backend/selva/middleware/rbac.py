# selva/middleware/rbac.py
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from selva.core.exceptions import Forbidden, Unauthorized
from selva.dependencies import get_auth_service
from selva.services.auth_service import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> dict:
    """Claims of the bearer token: {userId, email, role}."""
    if not token:
        raise Unauthorized("Not authenticated")
    return auth.verify_token(token)


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Optional[dict]:
    """Claims when a bearer token is sent, None when it is absent. A bad token is still a 401."""
    if not token:
        return None
    return auth.verify_token(token)


def is_admin(user: dict = Depends(get_current_user)) -> dict:
    if user.get("role") != "admin":
        raise Forbidden("Admin access only")
    return user
