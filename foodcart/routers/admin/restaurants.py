"""
Admin Restaurants Router
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from foodcart.auth import verify_admin
from foodcart.database import get_database
from foodcart.errors import ERROR_RESTAURANT_NOT_FOUND
from .models import CreateRestaurantRequest, UpdateRestaurantRequest

router = APIRouter(tags=["admin-restaurants"])


@router.get("/restaurants")
async def admin_get_restaurants(admin=Depends(verify_admin)):
    db = get_database()
    return [r.to_api() for r in await db.restaurants.list_all()]


@router.post("/restaurants", status_code=201)
async def admin_create_restaurant(request: CreateRestaurantRequest, admin=Depends(verify_admin)):
    db = get_database()
    restaurant = await db.restaurants.create(request.to_row())
    return restaurant.to_api()


@router.put("/restaurants/{restaurant_id}")
async def admin_update_restaurant(
    restaurant_id: str, request: UpdateRestaurantRequest, admin=Depends(verify_admin)
):
    db = get_database()
    restaurant = await db.restaurants.update(restaurant_id, request.to_row(partial=True))
    if not restaurant:
        raise HTTPException(status_code=404, detail=ERROR_RESTAURANT_NOT_FOUND)
    return restaurant.to_api()


@router.delete("/restaurants/{restaurant_id}", status_code=204)
async def admin_delete_restaurant(restaurant_id: str, admin=Depends(verify_admin)):
    db = get_database()
    if not await db.restaurants.delete(restaurant_id):
        raise HTTPException(status_code=404, detail=ERROR_RESTAURANT_NOT_FOUND)
    return Response(status_code=204)
