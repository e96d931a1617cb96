"""
Cart Router

Server-side cart for the signed-in user. Totals are computed by the cart
engine; responses carry numbers plus a formatted total for display.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from foodcart.auth import SessionUser, verify_session
from foodcart.cart import CartState, build_line_item
from foodcart.cart.addons import addons_for_product, select_addons
from foodcart.database import get_database
from foodcart.errors import (
    CartUnavailableError,
    EmptyCartError,
    ERROR_CART_EMPTY,
    ERROR_FOOD_ITEM_NOT_FOUND,
    ERROR_SERVICE_UNAVAILABLE,
)
from foodcart.logging import get_logger
from foodcart.money import format_money, to_float
from foodcart.orders.checkout import line_item_payload
from .deps import get_cart_manager, get_checkout_service
from .models import AddToCartRequest, CheckoutRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(state: CartState) -> dict:
    items = []
    for item in state.items:
        line = line_item_payload(item)
        line["lineTotal"] = to_float(item.line_total)
        items.append(line)

    return {
        "items": items,
        "totalItems": state.total_items,
        "totalPrice": to_float(state.total_price),
        "formattedTotal": format_money(state.total_price),
    }


async def _addons_for(food_item_id: str, addon_ids: Optional[list[str]]):
    """Resolve add-on ids against the item's menu; None means match any variant."""
    if addon_ids is None:
        return None
    db = get_database()
    food_item = await db.food_items.get_by_id(food_item_id)
    if not food_item:
        raise HTTPException(status_code=404, detail=ERROR_FOOD_ITEM_NOT_FOUND)
    try:
        return select_addons(addons_for_product(food_item.category, food_item.name), addon_ids)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/cart")
async def get_cart(user: SessionUser = Depends(verify_session)):
    try:
        state = await get_cart_manager().get_cart(user.id)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    return _format_cart_response(state)


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, user: SessionUser = Depends(verify_session)):
    """Add a food item with selected add-ons; identical lines merge."""
    db = get_database()
    food_item = await db.food_items.get_by_id(request.food_item_id)
    if not food_item:
        raise HTTPException(status_code=404, detail=ERROR_FOOD_ITEM_NOT_FOUND)

    try:
        line = build_line_item(food_item, request.quantity, request.addon_ids)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        state = await get_cart_manager().add_item(user.id, line)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    return _format_cart_response(state)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, user: SessionUser = Depends(verify_session)):
    """Set a line's quantity (0 = remove)."""
    addons = await _addons_for(request.id, request.addon_ids)
    try:
        state = await get_cart_manager().update_item_quantity(user.id, request.id, request.quantity, addons)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    return _format_cart_response(state)


@router.delete("/cart/item")
async def remove_cart_item(id: str, user: SessionUser = Depends(verify_session)):
    try:
        state = await get_cart_manager().remove_item(user.id, id)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    return _format_cart_response(state)


@router.post("/cart/clear")
async def clear_cart(user: SessionUser = Depends(verify_session)):
    try:
        state = await get_cart_manager().clear_cart(user.id)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    return _format_cart_response(state)


@router.post("/cart/checkout", status_code=201)
async def checkout(request: CheckoutRequest, user: SessionUser = Depends(verify_session)):
    """Place an order from the cart; the cart is cleared once the order is stored."""
    service = get_checkout_service()
    try:
        order = await service.place_order(
            user.id,
            user.name,
            request.type,
            request.details.model_dump(by_alias=True),
        )
    except EmptyCartError:
        raise HTTPException(status_code=400, detail=ERROR_CART_EMPTY)
    except CartUnavailableError:
        raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)
    except Exception as e:
        logger.error(f"Checkout failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to place order")
    return order.to_api()
