"""
Order Status Management Service

Centralized service for order status transitions made from the admin panel.
"""
from typing import Optional

from foodcart.logging import get_logger
from foodcart.models import Order, OrderStatus
from foodcart.repositories import OrderRepository

logger = get_logger(__name__)

TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    OrderStatus.PREPARING: (
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    ),
    OrderStatus.OUT_FOR_DELIVERY: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (),  # Final state
    OrderStatus.CANCELLED: (),  # Final state
}


class OrderNotFoundError(Exception):
    pass


class InvalidStatusTransitionError(Exception):
    pass


def parse_status(value: str) -> OrderStatus:
    """
    Case-insensitive lookup of an order status by its display value.

    Raises:
        ValueError: for an unknown status
    """
    for status in OrderStatus:
        if status.value.lower() == (value or "").strip().lower():
            return status
    raise ValueError(f"Unknown order status: {value!r}")


class OrderStatusService:
    """Validates and applies order status changes."""

    def __init__(self, repo: OrderRepository):
        self.repo = repo

    async def can_transition_to(self, order_id: str, target: OrderStatus) -> tuple[bool, Optional[str]]:
        """
        Check if order can transition to target status.

        Returns:
            (can_transition, reason_if_not)
        """
        current = await self.repo.get_status(order_id)
        if current is None:
            return False, "Order not found"

        try:
            current_status = parse_status(current)
        except ValueError:
            # Legacy value: allow an admin to move it anywhere
            return True, None

        allowed = TRANSITIONS[current_status]
        if target not in allowed:
            names = [s.value for s in allowed]
            return False, f"Cannot transition from '{current_status.value}' to '{target.value}'. Allowed: {names}"
        return True, None

    async def update_status(self, order_id: str, new_status: str, check_transition: bool = True) -> Order:
        """
        Set an order's status.

        Raises:
            ValueError: unknown status value
            OrderNotFoundError: no such order
            InvalidStatusTransitionError: transition not allowed (when checked)
        """
        target = parse_status(new_status)

        if check_transition:
            ok, reason = await self.can_transition_to(order_id, target)
            if not ok:
                if reason == "Order not found":
                    raise OrderNotFoundError(order_id)
                logger.warning(f"Cannot update order {order_id} status: {reason}")
                raise InvalidStatusTransitionError(reason)

        order = await self.repo.update_status(order_id, target.value)
        if order is None:
            raise OrderNotFoundError(order_id)

        logger.info(f"Updated order {order_id} status to '{target.value}'")
        return order
