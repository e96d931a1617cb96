"""
Public Orders Router

Order submission for clients that build the order themselves, and the
per-user order history.
"""
from datetime import UTC, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from foodcart.auth import SessionUser, verify_session
from foodcart.database import get_database
from foodcart.errors import ERROR_INTERNAL, ERROR_UNAUTHORIZED
from foodcart.logging import get_logger
from .models import CreateOrderRequest

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


@router.post("/orders", status_code=201)
async def create_order(request: CreateOrderRequest):
    """Store an order as Pending."""
    payload = request.model_dump(mode="json")
    payload["date"] = payload["date"] or datetime.now(UTC).isoformat()

    db = get_database()
    try:
        order = await db.orders_domain.create(payload)
    except Exception as e:
        logger.error(f"Failed to create order: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)
    return order.to_api()


@router.get("/orders/user/{user_id}")
async def get_user_orders(
    user_id: str,
    active: Optional[bool] = None,
    user: SessionUser = Depends(verify_session),
):
    """A user's orders, newest first. Admin may read anyone's."""
    if not user.is_admin and user.id != user_id:
        raise HTTPException(status_code=403, detail=ERROR_UNAUTHORIZED)

    db = get_database()
    orders = await db.orders_domain.list_for_user(user_id, active)
    return [order.to_api() for order in orders]
