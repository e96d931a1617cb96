"""
Tests for CartStore and session-end handling
"""

from decimal import Decimal

import pytest

from foodcart.auth import SessionEvents
from foodcart.cart import AddOn, CartStore, EMPTY_CART, LineItem


def line(item_id="p1", price=100, quantity=1, addons=()):
    return LineItem(id=item_id, name=item_id, unit_price=price, quantity=quantity, addons=addons)


class TestCartStore:
    """Tests for CartStore operations."""

    def test_starts_empty(self):
        assert CartStore().snapshot() == EMPTY_CART

    def test_snapshot_is_not_affected_by_later_mutations(self):
        store = CartStore()
        store.add_item(line("p1"))
        snapshot = store.snapshot()
        store.add_item(line("p2"))
        assert [i.id for i in snapshot.items] == ["p1"]
        assert [i.id for i in store.snapshot().items] == ["p1", "p2"]

    def test_operations_return_new_state(self):
        store = CartStore()
        state = store.add_item(line("p1", 100, 2))
        assert state is store.snapshot()
        assert state.total_price == Decimal("200")

    def test_remove_and_update_with_addons(self):
        cheese = AddOn("a1", "Extra Cheese", 10)
        store = CartStore()
        store.add_item(line("p1", 100, 1, (cheese,)))
        store.add_item(line("p1", 100, 1))
        store.update_quantity("p1", 4, addons=[])
        assert [(i.addons, i.quantity) for i in store.snapshot().items] == [((cheese,), 1), ((), 4)]
        store.remove_item("p1", addons=[cheese])
        assert store.snapshot().total_items == 4

    def test_clear(self):
        store = CartStore(initial_state=EMPTY_CART)
        store.add_item(line())
        assert store.clear() == EMPTY_CART


class TestLogoutReset:
    """CartStore subscribed to SessionEvents."""

    @pytest.mark.asyncio
    async def test_logout_of_owner_resets(self):
        events = SessionEvents()
        store = CartStore(owner_id="u1", session_events=events)
        store.add_item(line())

        await events.emit_logout("u1")

        assert store.snapshot() == EMPTY_CART

    @pytest.mark.asyncio
    async def test_logout_of_other_user_keeps_cart(self):
        events = SessionEvents()
        store = CartStore(owner_id="u1", session_events=events)
        store.add_item(line())

        await events.emit_logout("u2")

        assert store.snapshot().total_items == 1

    @pytest.mark.asyncio
    async def test_anonymous_store_resets_on_any_logout(self):
        events = SessionEvents()
        store = CartStore(session_events=events)
        store.add_item(line())

        await events.emit_logout("whoever")

        assert store.snapshot().is_empty

    @pytest.mark.asyncio
    async def test_close_unsubscribes(self):
        events = SessionEvents()
        store = CartStore(owner_id="u1", session_events=events)
        store.close()
        store.add_item(line())

        await events.emit_logout("u1")

        assert events.subscriber_count == 0
        assert store.snapshot().total_items == 1
