# selva/routes/auth.py
from fastapi import APIRouter, Depends, Security

from selva.dependencies import get_auth_service
from selva.middleware.rbac import get_current_user
from selva.schemas.user import LoginSchema, RegisterSchema
from selva.services.auth_service import AuthService

auth_router = APIRouter(tags=["Auth"])


# ------------------------
# Register
# ------------------------
@auth_router.post("/register", status_code=201)
async def register(data: RegisterSchema, auth: AuthService = Depends(get_auth_service)):
    result = await auth.register(data)
    return {"message": "User registered successfully", **result}


# ------------------------
# Login
# ------------------------
@auth_router.post("/login")
async def login(data: LoginSchema, auth: AuthService = Depends(get_auth_service)):
    result = await auth.login(data)
    return {"message": "Login successful", **result}


# ------------------------
# Logout (stateless tokens: acknowledgement only)
# ------------------------
@auth_router.post("/logout")
async def logout(auth: AuthService = Depends(get_auth_service)):
    return auth.logout()


# ------------------------
# Get current user info
# ------------------------
@auth_router.get("/me")
async def get_current_user_info(
    current_user: dict = Security(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.get_user(current_user["userId"])
