"""
Admin API Router

Admin-only endpoints for dashboard stats, users, restaurants, food items
and orders. Combines all sub-routers into a single router.
"""
from fastapi import APIRouter

from .food_items import router as food_items_router
from .orders import router as orders_router
from .restaurants import router as restaurants_router
from .stats import router as stats_router
from .users import router as users_router

router = APIRouter(tags=["admin"])

router.include_router(stats_router)
router.include_router(users_router)
router.include_router(restaurants_router)
router.include_router(food_items_router)
router.include_router(orders_router)

__all__ = ["router"]
