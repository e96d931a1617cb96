"""User domain service: signup and credential checks."""
import hmac
from datetime import UTC, datetime
from typing import Any, Optional

from foodcart.auth.passwords import hash_password, verify_password
from foodcart.logging import get_logger, sanitize_string_for_logging
from foodcart.models import User
from foodcart.repositories import UserRepository

logger = get_logger(__name__)


class UserAlreadyExistsError(Exception):
    """Email or phone is already registered."""


class UsersDomain:
    """User domain operations."""

    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    async def signup(self, name: str, email: str, phone: str, password: str) -> User:
        """
        Register a customer.

        Raises:
            UserAlreadyExistsError: if the email or phone is taken
        """
        if await self.repo.get_by_email(email) or await self.repo.get_by_phone(phone):
            raise UserAlreadyExistsError(email)

        now = datetime.now(UTC)
        user = await self.repo.create({
            "name": name,
            "email": email,
            "phone": phone,
            "password_hash": hash_password(password),
            "role": "user",
            "signup_date": now.date().isoformat(),
            "created_at": now.isoformat(),
        })
        logger.info(f"New user signed up: {sanitize_string_for_logging(email)}")
        return user

    async def authenticate(self, email_or_phone: str, password: str) -> Optional[User]:
        """Return the user when the login name and password match."""
        user = await self.repo.get_by_login(email_or_phone)
        if user and verify_password(password, user.password_hash):
            return user
        return None

    async def create_by_admin(self, data: dict[str, Any]) -> User:
        """Admin-side create; a plain `password` is stored hashed."""
        data = dict(data)
        password = data.pop("password", None)
        if password:
            data["password_hash"] = hash_password(password)
        data.setdefault("role", "user")
        data.setdefault("created_at", datetime.now(UTC).isoformat())
        return await self.repo.create(data)

    async def update_by_admin(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        data = dict(data)
        password = data.pop("password", None)
        if password:
            data["password_hash"] = hash_password(password)
        return await self.repo.update(user_id, data)


def check_admin_credentials(username: str, password: str, admin_username: str, admin_password: str) -> bool:
    """Constant-time comparison against the configured admin login."""
    if not admin_password:
        return False
    return hmac.compare_digest(username.encode(), admin_username.encode()) and hmac.compare_digest(
        password.encode(), admin_password.encode()
    )
