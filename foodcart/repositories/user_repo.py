"""User Repository - User CRUD and login lookups."""
from typing import Optional

from foodcart.models import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """User database operations."""

    table = "users"
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._query().select("*").eq("email", email).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_phone(self, phone: str) -> Optional[User]:
        result = await self._query().select("*").eq("phone", phone).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_login(self, email_or_phone: str) -> Optional[User]:
        """Find a user whose email or phone equals the login name."""
        return await self.get_by_email(email_or_phone) or await self.get_by_phone(email_or_phone)
