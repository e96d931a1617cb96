"""
Admin Stats Router

Dashboard counters.
"""
import asyncio

from fastapi import APIRouter, Depends

from foodcart.auth import verify_admin
from foodcart.database import get_database
from foodcart.money import to_float

router = APIRouter(tags=["admin-stats"])


@router.get("/stats")
async def admin_get_stats(admin=Depends(verify_admin)):
    """Totals for the dashboard cards."""
    db = get_database()
    total_orders, total_users, total_restaurants, revenue = await asyncio.gather(
        db.orders.count(),
        db.users.count(),
        db.restaurants.count(),
        db.orders.total_revenue(),
    )
    return {
        "totalOrders": total_orders,
        "totalUsers": total_users,
        "totalRestaurants": total_restaurants,
        "totalRevenue": to_float(revenue),
    }
