"""
Public Catalog Router

Restaurants, menus, categories and curated food lists. No authentication.
"""
from fastapi import APIRouter, HTTPException

from foodcart.database import get_database
from foodcart.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["catalog"])


def _items(items) -> list[dict]:
    return [item.to_api() for item in items]


@router.get("/restaurants")
async def get_restaurants():
    db = get_database()
    return [r.to_api() for r in await db.restaurants.list_all()]


@router.get("/restaurants/{restaurant_id}/menu")
async def get_restaurant_menu(restaurant_id: str):
    """Food items of a restaurant and their distinct categories."""
    db = get_database()
    try:
        menu = await db.catalog_domain.get_menu(restaurant_id)
    except Exception as e:
        logger.error(f"Failed to fetch menu for {restaurant_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch restaurant menu")

    if not menu["items"]:
        logger.info(f"No menu items for restaurant {restaurant_id}")
    return {"items": _items(menu["items"]), "categories": menu["categories"]}


@router.get("/categories")
async def get_categories():
    db = get_database()
    return await db.catalog_domain.get_categories()


@router.get("/trending")
async def get_trending():
    db = get_database()
    return _items(await db.food_items.get_trending())


@router.get("/best-reviewed")
async def get_best_reviewed():
    db = get_database()
    return _items(await db.food_items.get_best_reviewed())


@router.get("/popular")
async def get_popular():
    # No popularity signal yet: every item is listed
    db = get_database()
    return _items(await db.food_items.list_all())
