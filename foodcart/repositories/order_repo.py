"""Order Repository - Order operations."""
from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from foodcart.models import Order
from foodcart.money import to_decimal

from .base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Order database operations."""

    table = "orders"
    model = Order

    async def get_by_user(self, user_id: str) -> list[Order]:
        """User's orders, newest first."""
        result = await (
            self._query().select("*").eq("user_id", str(user_id)).order("created_at", desc=True).execute()
        )
        return [Order(**o) for o in result.data or []]

    async def update_status(self, order_id: str, status: str) -> Optional[Order]:
        return await self.update(
            order_id, {"status": status, "updated_at": datetime.now(UTC).isoformat()}
        )

    async def get_status(self, order_id: str) -> Optional[str]:
        result = await self._query().select("status").eq("id", order_id).execute()
        return result.data[0].get("status") if result.data else None

    async def total_revenue(self) -> Decimal:
        result = await self._query().select("total").execute()
        return sum((to_decimal(row.get("total")) for row in result.data or []), Decimal("0"))
