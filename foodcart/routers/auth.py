"""
Auth Router

Login (admin or customer), signup and logout.
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from foodcart.auth import (
    ADMIN_PASSWORD,
    ADMIN_USER_ID,
    ADMIN_USERNAME,
    SessionUser,
    create_web_session,
    revoke_web_session,
    verify_session,
)
from foodcart.database import get_database
from foodcart.domains import UserAlreadyExistsError, check_admin_credentials
from foodcart.errors import ERROR_INVALID_CREDENTIALS, ERROR_USER_EXISTS
from foodcart.logging import get_logger, sanitize_string_for_logging
from foodcart.models import UserRole
from .deps import end_session
from .models import LoginRequest, SignupRequest

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/auth/login")
async def login(request: LoginRequest):
    """Admin credentials first, then a customer by email or phone."""
    if check_admin_credentials(request.username, request.password, ADMIN_USERNAME, ADMIN_PASSWORD):
        token = create_web_session(ADMIN_USER_ID, ADMIN_USERNAME, UserRole.ADMIN.value)
        logger.info("Admin logged in")
        return {
            "success": True,
            "token": token,
            "user": {"id": ADMIN_USER_ID, "name": "Admin", "role": UserRole.ADMIN.value},
        }

    db = get_database()
    user = await db.users_domain.authenticate(request.username, request.password)
    if not user:
        logger.warning(f"Failed login for {sanitize_string_for_logging(request.username)}")
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": ERROR_INVALID_CREDENTIALS},
        )

    token = create_web_session(user.id, user.name, user.role.value)
    return {"success": True, "token": token, "user": user.to_api()}


@router.post("/auth/signup", status_code=201)
async def signup(request: SignupRequest):
    db = get_database()
    try:
        user = await db.users_domain.signup(request.name, request.email, request.phone, request.password)
    except UserAlreadyExistsError:
        raise HTTPException(status_code=409, detail=ERROR_USER_EXISTS)

    token = create_web_session(user.id, user.name, user.role.value)
    return {"success": True, "token": token, "user": user.to_api()}


@router.post("/auth/logout")
async def logout(user: SessionUser = Depends(verify_session)):
    """End the session; per-user state (the cart) is reset by subscribers."""
    revoke_web_session(user.token)
    await end_session(user.id)
    return {"success": True}
