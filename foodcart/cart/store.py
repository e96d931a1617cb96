"""In-process cart store for a single owner."""
from typing import Iterable, Optional

from foodcart.auth.events import SessionEvents
from .models import AddOn, CartState, EMPTY_CART, LineItem
from .reducer import (
    AddItem,
    CartAction,
    ClearCart,
    RemoveItem,
    ResetCart,
    UpdateQuantity,
    cart_reducer,
)


class CartStore:
    """
    Holds one owner's cart state and applies actions through the reducer.

    Each dispatch computes the next state from the current one and publishes
    it with a single assignment, so snapshot() always returns a fully applied
    state. Callers are expected to dispatch from one place at a time
    (an event loop, or under CartManager's per-user lock).

    When `session_events` is given the store resets itself on logout of
    `owner_id` (or of anyone, when owner_id is None).
    """

    def __init__(
        self,
        owner_id: Optional[str] = None,
        session_events: Optional[SessionEvents] = None,
        initial_state: CartState = EMPTY_CART,
    ):
        self.owner_id = owner_id
        self._state = initial_state
        self._unsubscribe = session_events.subscribe(self._on_logout) if session_events else None

    def dispatch(self, action: CartAction) -> CartState:
        self._state = cart_reducer(self._state, action)
        return self._state

    def add_item(self, item: LineItem) -> CartState:
        return self.dispatch(AddItem(item))

    def remove_item(self, item_id: str, addons: Optional[Iterable[AddOn]] = None) -> CartState:
        return self.dispatch(RemoveItem(item_id, tuple(addons) if addons is not None else None))

    def update_quantity(
        self,
        item_id: str,
        quantity: int,
        addons: Optional[Iterable[AddOn]] = None,
    ) -> CartState:
        return self.dispatch(
            UpdateQuantity(item_id, quantity, tuple(addons) if addons is not None else None)
        )

    def clear(self) -> CartState:
        return self.dispatch(ClearCart())

    def reset(self) -> CartState:
        return self.dispatch(ResetCart())

    def snapshot(self) -> CartState:
        """Current state. CartState is immutable, so this is safe to hand out."""
        return self._state

    def _on_logout(self, owner_id: str) -> None:
        if self.owner_id is None or owner_id == self.owner_id:
            self.reset()

    def close(self) -> None:
        """Stop listening for session events."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
