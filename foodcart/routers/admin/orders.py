"""
Admin Orders Router

Order listing and status management.
"""
from fastapi import APIRouter, Depends, HTTPException

from foodcart.auth import verify_admin
from foodcart.database import get_database
from foodcart.errors import ERROR_ORDER_INVALID_STATUS, ERROR_ORDER_NOT_FOUND
from foodcart.orders import (
    InvalidStatusTransitionError,
    OrderNotFoundError,
    OrderStatusService,
)
from .models import UpdateOrderStatusRequest

router = APIRouter(tags=["admin-orders"])


@router.get("/orders")
async def admin_get_orders(admin=Depends(verify_admin)):
    """All orders, newest first"""
    db = get_database()
    return [order.to_api() for order in await db.orders_domain.list_all()]


@router.put("/orders/{order_id}/status")
async def admin_update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    force: bool = False,
    admin=Depends(verify_admin),
):
    """Move an order along its lifecycle; `force` skips transition checks."""
    db = get_database()
    service = OrderStatusService(db.orders)
    try:
        order = await service.update_status(order_id, request.status, check_transition=not force)
    except ValueError:
        raise HTTPException(status_code=400, detail=ERROR_ORDER_INVALID_STATUS)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return order.to_api()
