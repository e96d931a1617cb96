"""
Tests for CartManager (Redis-backed carts)
"""

import asyncio
import gc
import json
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from foodcart.auth import SessionEvents
from foodcart.cart import AddOn, CartManager, LineItem
from foodcart.db import RedisKeys, TTL
from foodcart.errors import CartUnavailableError, EmptyCartError


def line(item_id="p1", price=100, quantity=1, addons=()):
    return LineItem(id=item_id, name=item_id, unit_price=price, quantity=quantity, addons=addons)


class TestCartManagerStorage:
    """Load / save behaviour."""

    @pytest.mark.asyncio
    async def test_empty_when_nothing_stored(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        cart = await manager.get_cart("u1")
        assert cart.is_empty

    @pytest.mark.asyncio
    async def test_add_persists_with_ttl(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await manager.add_item("u1", line("p1", 100, 2))

        key = RedisKeys.cart_key("u1")
        assert fake_redis.ttl[key] == TTL.CART
        stored = json.loads(fake_redis.store[key])
        assert stored["totalItems"] == 2
        assert stored["items"][0]["price"] == "100"

    @pytest.mark.asyncio
    async def test_state_survives_new_manager(self, fake_redis):
        await CartManager(redis=fake_redis).add_item("u1", line("p1", 100, 2))
        cart = await CartManager(redis=fake_redis).get_cart("u1")
        assert cart.total_price == Decimal("200")

    @pytest.mark.asyncio
    async def test_emptied_cart_deletes_key(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await manager.add_item("u1", line())
        await manager.remove_item("u1", "p1")
        assert RedisKeys.cart_key("u1") not in fake_redis.store

    @pytest.mark.asyncio
    async def test_corrupted_data_treated_as_empty(self, fake_redis):
        key = RedisKeys.cart_key("u1")
        fake_redis.store[key] = "{not json"
        manager = CartManager(redis=fake_redis)

        cart = await manager.get_cart("u1")

        assert cart.is_empty
        assert key not in fake_redis.store

    @pytest.mark.asyncio
    async def test_stored_totals_are_recomputed(self, fake_redis):
        fake_redis.store[RedisKeys.cart_key("u1")] = json.dumps({
            "items": [{"id": "p1", "name": "x", "price": "50", "quantity": 2, "addons": []}],
            "totalItems": 99,
            "totalPrice": "1",
        })
        cart = await CartManager(redis=fake_redis).get_cart("u1")
        assert cart.total_items == 2
        assert cart.total_price == Decimal("100")

    @pytest.mark.asyncio
    async def test_redis_failure_raises_unavailable(self):
        redis = AsyncMock()
        redis.get.side_effect = ConnectionError("down")
        manager = CartManager(redis=redis)
        with pytest.raises(CartUnavailableError):
            await manager.get_cart("u1")


class TestCartManagerOperations:
    """Mutations through the manager."""

    @pytest.mark.asyncio
    async def test_merge_update_remove(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        cheese = AddOn("1", "Extra Cheese", 40)
        await manager.add_item("u1", line("p1", 299, 1, (cheese,)))
        await manager.add_item("u1", line("p1", 299, 1, (cheese,)))
        cart = await manager.add_item("u1", line("p1", 299, 1))
        assert [i.quantity for i in cart.items] == [2, 1]
        assert cart.total_price == Decimal("977")

        cart = await manager.update_item_quantity("u1", "p1", 5, addons=[])
        assert cart.total_items == 7

        cart = await manager.remove_item("u1", "p1")
        assert cart.total_items == 5
        assert cart.total_price == Decimal("1495")

    @pytest.mark.asyncio
    async def test_users_are_isolated(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await manager.add_item("u1", line("p1"))
        assert (await manager.get_cart("u2")).is_empty

    @pytest.mark.asyncio
    async def test_idle_user_locks_are_released(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        for user_id in ("u1", "u2", "u3"):
            await manager.add_item(user_id, line())
            await manager.clear_cart(user_id)
        gc.collect()
        assert len(manager._locks) == 0

    @pytest.mark.asyncio
    async def test_concurrent_adds_are_serialized(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await asyncio.gather(*[manager.add_item("u1", line("p1", 10, 1)) for _ in range(20)])
        cart = await manager.get_cart("u1")
        assert cart.total_items == 20
        assert cart.total_price == Decimal("200")


class TestCartManagerLogout:
    """Session end resets the user's cart."""

    @pytest.mark.asyncio
    async def test_logout_resets_only_that_user(self, fake_redis):
        events = SessionEvents()
        manager = CartManager(session_events=events, redis=fake_redis)
        await manager.add_item("u1", line())
        await manager.add_item("u2", line())

        await events.emit_logout("u1")

        assert (await manager.get_cart("u1")).is_empty
        assert (await manager.get_cart("u2")).total_items == 1

    def test_subscribes_once_and_close_unsubscribes(self, fake_redis):
        events = SessionEvents()
        manager = CartManager(session_events=events, redis=fake_redis)
        assert events.subscriber_count == 1
        manager.close()
        assert events.subscriber_count == 0


class TestCartManagerCheckout:
    """checkout(): snapshot -> submit -> clear."""

    @pytest.mark.asyncio
    async def test_clears_after_successful_submit(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await manager.add_item("u1", line("p1", 100, 3))
        submitted = []

        async def submit(snapshot):
            submitted.append(snapshot)
            return "order-1"

        result = await manager.checkout("u1", submit)

        assert result == "order-1"
        assert submitted[0].total_price == Decimal("300")
        assert (await manager.get_cart("u1")).is_empty

    @pytest.mark.asyncio
    async def test_failed_submit_keeps_cart(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        await manager.add_item("u1", line("p1", 100, 3))

        async def submit(snapshot):
            raise RuntimeError("order service down")

        with pytest.raises(RuntimeError):
            await manager.checkout("u1", submit)

        assert (await manager.get_cart("u1")).total_items == 3

    @pytest.mark.asyncio
    async def test_empty_cart_raises(self, fake_redis):
        manager = CartManager(redis=fake_redis)
        submit = AsyncMock()
        with pytest.raises(EmptyCartError):
            await manager.checkout("u1", submit)
        submit.assert_not_awaited()
