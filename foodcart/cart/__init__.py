"""Cart package: models, reducer, store, add-on menus and the Redis-backed manager."""
from .models import AddOn, LineItem, CartState, EMPTY_CART
from .reducer import AddItem, RemoveItem, UpdateQuantity, ClearCart, ResetCart, cart_reducer
from .store import CartStore
from .addons import addons_for_product, build_line_item
from .service import CartManager

__all__ = [
    "AddOn",
    "LineItem",
    "CartState",
    "EMPTY_CART",
    "AddItem",
    "RemoveItem",
    "UpdateQuantity",
    "ClearCart",
    "ResetCart",
    "cart_reducer",
    "CartStore",
    "addons_for_product",
    "build_line_item",
    "CartManager",
]
