"""FastAPI dependencies for bearer-session authentication."""
import os
from typing import Optional

from fastapi import Depends, Header, HTTPException
from pydantic import BaseModel

from foodcart.errors import ERROR_ADMIN_REQUIRED, ERROR_INVALID_SESSION, ERROR_UNAUTHORIZED
from foodcart.models import UserRole
from .session import verify_web_session_token

ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "")
ADMIN_USER_ID = "admin"


class SessionUser(BaseModel):
    """Identity attached to a bearer session."""
    id: str
    name: str
    role: UserRole = UserRole.USER
    token: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


async def verify_session(
    authorization: str = Header(None, alias="Authorization"),
) -> SessionUser:
    """
    Verify `Authorization: Bearer <session_token>`.

    Raises 401 when the header is missing or the session is unknown/expired.
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    session = verify_web_session_token(token)
    if not session:
        raise HTTPException(status_code=401, detail=ERROR_INVALID_SESSION)

    return SessionUser(
        id=session["user_id"],
        name=session.get("username") or "User",
        role=session.get("role", UserRole.USER),
        token=token,
    )


async def verify_admin(user: SessionUser = Depends(verify_session)) -> SessionUser:
    """Verify that the session belongs to the admin (403 otherwise)."""
    if not user.is_admin:
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)
    return user
