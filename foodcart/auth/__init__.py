"""Authentication package."""
from .events import SessionEvents
from .passwords import hash_password, verify_password
from .session import create_web_session, verify_web_session_token, revoke_web_session
from .dependencies import (
    ADMIN_PASSWORD,
    ADMIN_USER_ID,
    ADMIN_USERNAME,
    SessionUser,
    extract_bearer_token,
    verify_admin,
    verify_session,
)

__all__ = [
    "SessionEvents",
    "hash_password",
    "verify_password",
    "create_web_session",
    "verify_web_session_token",
    "revoke_web_session",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "ADMIN_USER_ID",
    "SessionUser",
    "extract_bearer_token",
    "verify_session",
    "verify_admin",
]
