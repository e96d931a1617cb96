"""
Admin API Pydantic Models

Shared request bodies for admin endpoints. The admin panel sends camelCase
keys; snake_case is accepted too.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from foodcart.models import UserRole


class AdminRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="ignore")

    def to_row(self, partial: bool = False) -> dict[str, Any]:
        """snake_case columns; `partial` keeps only fields the client sent."""
        return self.model_dump(mode="json", exclude_unset=partial, exclude_none=not partial)


# ==================== USER MODELS ====================

class CreateUserRequest(AdminRequest):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: UserRole = UserRole.USER


class UpdateUserRequest(AdminRequest):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None


# ==================== RESTAURANT MODELS ====================

class CreateRestaurantRequest(AdminRequest):
    name: str
    rating: float = 0
    delivery_time: Optional[str] = None
    image: Optional[str] = None
    cuisine: List[str] = []
    distance: Optional[str] = None


class UpdateRestaurantRequest(AdminRequest):
    name: Optional[str] = None
    rating: Optional[float] = None
    delivery_time: Optional[str] = None
    image: Optional[str] = None
    cuisine: Optional[List[str]] = None
    distance: Optional[str] = None


# ==================== FOOD ITEM MODELS ====================

class FoodItemFields(AdminRequest):
    @field_validator("restaurant_id", mode="before", check_fields=False)
    @classmethod
    def restaurant_id_as_string(cls, v):
        return str(v) if v not in (None, "") else None


class CreateFoodItemRequest(FoodItemFields):
    name: str
    price: float
    image: Optional[str] = None
    rating: float = 0
    category: Optional[str] = None
    description: Optional[str] = None
    is_trending: bool = False
    restaurant_id: Optional[Union[str, int]] = None


class UpdateFoodItemRequest(FoodItemFields):
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    rating: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    is_trending: Optional[bool] = None
    restaurant_id: Optional[Union[str, int]] = None


# ==================== ORDER MODELS ====================

class UpdateOrderStatusRequest(BaseModel):
    status: str
