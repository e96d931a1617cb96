"""
Admin Food Items Router

Menu management and the category list used by the item editor.
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from foodcart.auth import verify_admin
from foodcart.database import get_database
from foodcart.errors import ERROR_FOOD_ITEM_NOT_FOUND, ERROR_RESTAURANT_ID_REQUIRED
from foodcart.logging import get_logger
from .models import CreateFoodItemRequest, UpdateFoodItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["admin-food-items"])


@router.get("/food-items")
async def admin_get_food_items(admin=Depends(verify_admin)):
    db = get_database()
    return [item.to_api() for item in await db.food_items.list_all()]


@router.post("/food-items", status_code=201)
async def admin_create_food_item(request: CreateFoodItemRequest, admin=Depends(verify_admin)):
    """Create a menu item; it must belong to a restaurant."""
    if not request.restaurant_id:
        raise HTTPException(status_code=400, detail=ERROR_RESTAURANT_ID_REQUIRED)

    db = get_database()
    item = await db.food_items.create(request.to_row())
    logger.info(f"Food item {item.id} created for restaurant {item.restaurant_id}")
    return item.to_api()


@router.put("/food-items/{item_id}")
async def admin_update_food_item(item_id: str, request: UpdateFoodItemRequest, admin=Depends(verify_admin)):
    db = get_database()
    item = await db.food_items.update(item_id, request.to_row(partial=True))
    if not item:
        raise HTTPException(status_code=404, detail=ERROR_FOOD_ITEM_NOT_FOUND)
    return item.to_api()


@router.delete("/food-items/{item_id}", status_code=204)
async def admin_delete_food_item(item_id: str, admin=Depends(verify_admin)):
    db = get_database()
    if not await db.food_items.delete(item_id):
        raise HTTPException(status_code=404, detail=ERROR_FOOD_ITEM_NOT_FOUND)
    return Response(status_code=204)


@router.get("/categories")
async def admin_get_categories(admin=Depends(verify_admin)):
    """Default categories merged with the ones in use, sorted."""
    db = get_database()
    return await db.catalog_domain.get_admin_categories()
