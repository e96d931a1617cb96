"""Web session utilities (in-memory)."""
import secrets
from datetime import datetime, timezone, timedelta
from typing import Dict, Optional

SESSION_LIFETIME = timedelta(days=7)

_web_sessions: Dict[str, dict] = {}


def create_web_session(user_id: str, username: str, role: str) -> str:
    """Create a new web session and return the token."""
    session_token = secrets.token_urlsafe(32)
    now = datetime.now(timezone.utc)
    _web_sessions[session_token] = {
        "user_id": str(user_id),
        "username": username,
        "role": role,
        "created_at": now.isoformat(),
        "expires_at": (now + SESSION_LIFETIME).isoformat(),
    }
    return session_token


def verify_web_session_token(token: str) -> Optional[dict]:
    """Verify a web session token and return session data."""
    session = _web_sessions.get(token)
    if not session:
        return None

    expires_at = datetime.fromisoformat(session["expires_at"])
    if datetime.now(timezone.utc) > expires_at:
        del _web_sessions[token]
        return None

    return session


def revoke_web_session(token: str) -> Optional[dict]:
    """Drop a session; returns its data if it existed."""
    return _web_sessions.pop(token, None)
