"""Order placement and status management."""
from .checkout import CheckoutService, build_order_payload
from .status_service import (
    InvalidStatusTransitionError,
    OrderNotFoundError,
    OrderStatusService,
    TRANSITIONS,
    parse_status,
)

__all__ = [
    "CheckoutService",
    "build_order_payload",
    "OrderStatusService",
    "OrderNotFoundError",
    "InvalidStatusTransitionError",
    "TRANSITIONS",
    "parse_status",
]
