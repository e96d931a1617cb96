"""Orders domain: order submission and listings."""
from datetime import UTC, datetime
from typing import Any, Optional

from foodcart.logging import get_logger, sanitize_id_for_logging
from foodcart.models import Order, OrderStatus
from foodcart.repositories import OrderRepository

logger = get_logger(__name__)


class OrdersDomain:
    """Accepts finalized order payloads and stores them as Pending."""

    def __init__(self, repo: OrderRepository) -> None:
        self.repo = repo

    async def create(self, payload: dict[str, Any]) -> Order:
        """Persist an order; status is always Pending on creation."""
        data = {
            **payload,
            "status": OrderStatus.PENDING.value,
            "created_at": datetime.now(UTC).isoformat(),
        }
        order = await self.repo.create(data)
        logger.info(
            f"Order {sanitize_id_for_logging(order.id)} created for user "
            f"{sanitize_id_for_logging(order.user_id)}: total={order.total}"
        )
        return order

    async def list_all(self) -> list[Order]:
        return await self.repo.list_all(order_by="created_at", desc=True)

    async def list_for_user(self, user_id: str, active: Optional[bool] = None) -> list[Order]:
        """User's orders, newest first; `active` splits ongoing from past orders."""
        orders = await self.repo.get_by_user(user_id)
        if active is None:
            return orders
        return [order for order in orders if order.is_active == active]
