"""
Admin Users Router

User management endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from foodcart.auth import verify_admin
from foodcart.database import get_database
from foodcart.errors import ERROR_USER_NOT_FOUND
from .models import CreateUserRequest, UpdateUserRequest

router = APIRouter(tags=["admin-users"])


@router.get("/users")
async def admin_get_users(admin=Depends(verify_admin)):
    db = get_database()
    return [user.to_api() for user in await db.users.list_all()]


@router.post("/users", status_code=201)
async def admin_create_user(request: CreateUserRequest, admin=Depends(verify_admin)):
    """Create a user; a given password is stored hashed."""
    db = get_database()
    user = await db.users_domain.create_by_admin(request.to_row())
    return user.to_api()


@router.put("/users/{user_id}")
async def admin_update_user(user_id: str, request: UpdateUserRequest, admin=Depends(verify_admin)):
    db = get_database()
    user = await db.users_domain.update_by_admin(user_id, request.to_row(partial=True))
    if not user:
        raise HTTPException(status_code=404, detail=ERROR_USER_NOT_FOUND)
    return user.to_api()


@router.delete("/users/{user_id}", status_code=204)
async def admin_delete_user(user_id: str, admin=Depends(verify_admin)):
    db = get_database()
    if not await db.users.delete(user_id):
        raise HTTPException(status_code=404, detail=ERROR_USER_NOT_FOUND)
    return Response(status_code=204)
