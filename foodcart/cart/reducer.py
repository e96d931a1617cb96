"""
Cart reducer: every cart mutation is a pure (CartState, action) -> CartState step.

Matching rules:
- AddItem merges into the line with the same product id AND the same add-on
  selection (compared as a set of (id, price), order does not matter).
- RemoveItem / UpdateQuantity target the FIRST line with the product id.
  Passing `addons` narrows the match to the line with that exact selection.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from foodcart.money import multiply
from .models import AddOn, CartState, EMPTY_CART, LineItem


@dataclass(frozen=True)
class AddItem:
    item: LineItem


@dataclass(frozen=True)
class RemoveItem:
    id: str
    addons: Optional[tuple[AddOn, ...]] = None


@dataclass(frozen=True)
class UpdateQuantity:
    id: str
    quantity: int
    addons: Optional[tuple[AddOn, ...]] = None


@dataclass(frozen=True)
class ClearCart:
    """Empty the cart after an order was placed."""


@dataclass(frozen=True)
class ResetCart:
    """Empty the cart because the owning session ended."""


CartAction = Union[AddItem, RemoveItem, UpdateQuantity, ClearCart, ResetCart]


def find_merge_target(items: Iterable[LineItem], candidate: LineItem) -> Optional[int]:
    """Index of the line a candidate merges into, or None."""
    for index, item in enumerate(items):
        if item.id == candidate.id and item.has_addons(candidate.addons):
            return index
    return None


def find_line(
    items: Iterable[LineItem],
    item_id: str,
    addons: Optional[Iterable[AddOn]] = None,
) -> Optional[int]:
    """Index of the first line with `item_id` (and `addons`, when given)."""
    for index, item in enumerate(items):
        if item.id != item_id:
            continue
        if addons is None or item.has_addons(addons):
            return index
    return None


def _replace_at(items: tuple[LineItem, ...], index: int, item: LineItem) -> tuple[LineItem, ...]:
    return items[:index] + (item,) + items[index + 1:]


def _add_item(state: CartState, candidate: LineItem) -> CartState:
    index = find_merge_target(state.items, candidate)

    if index is None:
        return CartState(
            items=state.items + (candidate,),
            total_items=state.total_items + candidate.quantity,
            total_price=state.total_price + candidate.line_total,
        )

    existing = state.items[index]
    # The merged line takes the candidate's (latest catalog) unit price
    merged = replace(
        existing,
        unit_price=candidate.unit_price,
        quantity=existing.quantity + candidate.quantity,
    )
    return CartState(
        items=_replace_at(state.items, index, merged),
        total_items=state.total_items + candidate.quantity,
        total_price=state.total_price - existing.line_total + merged.line_total,
    )


def _remove_item(state: CartState, item_id: str, addons) -> CartState:
    index = find_line(state.items, item_id, addons)
    if index is None:
        return state

    removed = state.items[index]
    return CartState(
        items=state.items[:index] + state.items[index + 1:],
        total_items=state.total_items - removed.quantity,
        total_price=state.total_price - removed.line_total,
    )


def _update_quantity(state: CartState, item_id: str, quantity: int, addons) -> CartState:
    if quantity <= 0:
        return _remove_item(state, item_id, addons)

    index = find_line(state.items, item_id, addons)
    if index is None:
        return state

    existing = state.items[index]
    delta = quantity - existing.quantity
    return CartState(
        items=_replace_at(state.items, index, replace(existing, quantity=quantity)),
        total_items=state.total_items + delta,
        total_price=state.total_price + multiply(existing.unit_total, delta),
    )


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """Apply one action and return the new state. `state` is never modified."""
    if isinstance(action, AddItem):
        return _add_item(state, action.item)
    if isinstance(action, RemoveItem):
        return _remove_item(state, action.id, action.addons)
    if isinstance(action, UpdateQuantity):
        return _update_quantity(state, action.id, action.quantity, action.addons)
    if isinstance(action, (ClearCart, ResetCart)):
        return EMPTY_CART
    return state
