"""
Checkout: turn a user's cart snapshot into a placed order.

The cart is cleared only after the order service accepted the order; on any
failure the cart stays as it was and the error propagates to the caller.
"""
from datetime import UTC, datetime
from typing import Any, Optional

from foodcart.cart import CartManager, CartState, LineItem
from foodcart.domains import OrdersDomain
from foodcart.logging import get_logger, sanitize_id_for_logging
from foodcart.models import Order, OrderType
from foodcart.money import to_float

logger = get_logger(__name__)


def line_item_payload(item: LineItem) -> dict[str, Any]:
    """Order line as stored on the order document (prices as numbers)."""
    return {
        "id": item.id,
        "name": item.name,
        "image": item.image,
        "price": to_float(item.unit_price),
        "quantity": item.quantity,
        "addons": [
            {"id": addon.id, "name": addon.name, "price": to_float(addon.price)}
            for addon in item.addons
        ],
        "restaurantId": item.restaurant_id,
    }


def build_order_payload(
    snapshot: CartState,
    order_type: OrderType,
    user_id: str,
    user_name: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Order document for a cart snapshot; `total` is the snapshot's total price."""
    return {
        "type": OrderType(order_type).value,
        "user_id": user_id,
        "user_name": user_name,
        "items": [line_item_payload(item) for item in snapshot.items],
        "total": to_float(snapshot.total_price),
        "details": {k: v for k, v in (details or {}).items() if v is not None},
        "date": datetime.now(UTC).isoformat(),
    }


class CheckoutService:
    """Places orders from carts."""

    def __init__(self, cart_manager: CartManager, orders_domain: OrdersDomain):
        self.cart_manager = cart_manager
        self.orders_domain = orders_domain

    async def place_order(
        self,
        user_id: str,
        user_name: str,
        order_type: OrderType = OrderType.DELIVERY,
        details: Optional[dict[str, Any]] = None,
    ) -> Order:
        """
        Submit the user's cart as an order, then clear the cart.

        Raises:
            EmptyCartError: if the cart has no items
            CartUnavailableError: if cart storage is unreachable
        """

        async def submit(snapshot: CartState) -> Order:
            payload = build_order_payload(snapshot, order_type, user_id, user_name, details)
            return await self.orders_domain.create(payload)

        order = await self.cart_manager.checkout(user_id, submit)
        logger.info(f"Checkout complete for {sanitize_id_for_logging(user_id)}: order {order.id}")
        return order
