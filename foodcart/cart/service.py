"""Cart manager service using Redis storage."""
import asyncio
import json
import weakref
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

from foodcart.auth.events import SessionEvents
from foodcart.db import get_redis, RedisKeys, TTL
from foodcart.errors import CartUnavailableError, EmptyCartError
from foodcart.logging import get_logger, sanitize_id_for_logging
from .models import AddOn, CartState, EMPTY_CART, LineItem
from .store import CartStore

logger = get_logger(__name__)

T = TypeVar("T")


class CartManager:
    """
    Owns every user's cart on the server side.

    Features:
    - Cart state kept in Redis as JSON, 24-hour TTL for abandoned carts
    - Mutations for one user are serialized by a per-user lock
    - Carts reset when the user's session ends (via SessionEvents)
    """

    def __init__(self, session_events: Optional[SessionEvents] = None, redis=None):
        self._redis = redis  # Lazy initialization when None
        # Entries vanish once no coroutine holds or waits on the lock
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()
        self._unsubscribe = session_events.subscribe(self._on_logout) if session_events else None

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise CartUnavailableError(f"Redis not available: {e}") from e
        return self._redis

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

    async def _load(self, user_id: str) -> CartState:
        key = RedisKeys.cart_key(user_id)
        try:
            data = await self.redis.get(key)
        except CartUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Failed to get cart from Redis: {e}")
            raise CartUnavailableError(f"Cart service unavailable: {e}") from e

        if not data:
            return EMPTY_CART

        try:
            return CartState.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Corrupted cart data for user {sanitize_id_for_logging(user_id)}: {e}")
            await self.redis.delete(key)
            return EMPTY_CART

    async def _save(self, user_id: str, state: CartState) -> None:
        key = RedisKeys.cart_key(user_id)
        try:
            if state.is_empty:
                await self.redis.delete(key)
            else:
                await self.redis.set(key, json.dumps(state.to_dict()), ex=TTL.CART)
        except CartUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Failed to save cart to Redis: {e}")
            raise CartUnavailableError(f"Cart service unavailable: {e}") from e

    async def _apply(self, user_id: str, mutate: Callable[[CartStore], CartState]) -> CartState:
        """Load, mutate through a CartStore, save; all under the user's lock."""
        async with self._lock_for(user_id):
            store = CartStore(owner_id=user_id, initial_state=await self._load(user_id))
            state = mutate(store)
            await self._save(user_id, state)
            return state

    async def get_cart(self, user_id: str) -> CartState:
        """Snapshot of the user's cart (empty when nothing is stored)."""
        async with self._lock_for(user_id):
            return await self._load(user_id)

    async def add_item(self, user_id: str, item: LineItem) -> CartState:
        """Add a line item, merging with an identical product + add-on line."""
        state = await self._apply(user_id, lambda store: store.add_item(item))
        logger.info(
            f"Cart {sanitize_id_for_logging(user_id)}: +{item.quantity} x {sanitize_id_for_logging(item.id)} "
            f"-> {state.total_items} items"
        )
        return state

    async def remove_item(
        self,
        user_id: str,
        item_id: str,
        addons: Optional[Iterable[AddOn]] = None,
    ) -> CartState:
        """Remove the first line with `item_id` (or the exact add-on variant)."""
        return await self._apply(user_id, lambda store: store.remove_item(item_id, addons))

    async def update_item_quantity(
        self,
        user_id: str,
        item_id: str,
        new_quantity: int,
        addons: Optional[Iterable[AddOn]] = None,
    ) -> CartState:
        """Set a line's quantity; 0 or less removes the line."""
        return await self._apply(
            user_id, lambda store: store.update_quantity(item_id, new_quantity, addons)
        )

    async def clear_cart(self, user_id: str) -> CartState:
        """Empty the cart (after an order was placed)."""
        return await self._apply(user_id, lambda store: store.clear())

    async def reset_cart(self, user_id: str) -> CartState:
        """Empty the cart (session ended)."""
        return await self._apply(user_id, lambda store: store.reset())

    async def checkout(self, user_id: str, submit: Callable[[CartState], Awaitable[T]]) -> T:
        """
        Hand the current snapshot to `submit` and clear the cart once it succeeds.

        The user's lock is held throughout, so no add/remove can slip in
        between the snapshot and the clear. If `submit` raises, the cart is
        left untouched.

        Raises:
            EmptyCartError: if the cart has no items
        """
        async with self._lock_for(user_id):
            store = CartStore(owner_id=user_id, initial_state=await self._load(user_id))
            snapshot = store.snapshot()
            if snapshot.is_empty:
                raise EmptyCartError("Cart is empty")

            result = await submit(snapshot)

            await self._save(user_id, store.clear())
            return result

    async def _on_logout(self, user_id: str) -> None:
        await self.reset_cart(user_id)
        logger.info(f"Cart reset on logout for {sanitize_id_for_logging(user_id)}")

    def close(self) -> None:
        """Stop listening for session events."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
