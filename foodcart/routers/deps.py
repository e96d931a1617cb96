"""
Shared Dependencies for Routers

Lazy-loaded singletons. The session-event hub is created first so the cart
manager can subscribe to logout at construction.
"""

from typing import Optional, TYPE_CHECKING

from foodcart.auth.events import SessionEvents

if TYPE_CHECKING:
    from foodcart.cart import CartManager
    from foodcart.orders import CheckoutService


_session_events: Optional[SessionEvents] = None
_cart_manager: Optional["CartManager"] = None


def get_session_events() -> SessionEvents:
    """Get or create the SessionEvents singleton"""
    global _session_events
    if _session_events is None:
        _session_events = SessionEvents()
    return _session_events


def get_cart_manager() -> "CartManager":
    """Get or create CartManager singleton (lazy loaded)"""
    global _cart_manager
    if _cart_manager is None:
        from foodcart.cart import CartManager
        _cart_manager = CartManager(session_events=get_session_events())
    return _cart_manager


def get_checkout_service() -> "CheckoutService":
    """CheckoutService over the cart manager and the orders domain."""
    from foodcart.database import get_database
    from foodcart.orders import CheckoutService
    return CheckoutService(get_cart_manager(), get_database().orders_domain)


def reset_services() -> None:
    """Drop singletons (shutdown and tests)."""
    global _session_events, _cart_manager
    if _cart_manager is not None:
        _cart_manager.close()
    _cart_manager = None
    _session_events = None


async def end_session(user_id: str) -> None:
    """Emit logout for `user_id` after every per-user state owner has subscribed."""
    get_cart_manager()
    await get_session_events().emit_logout(user_id)
