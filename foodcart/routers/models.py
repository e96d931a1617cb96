"""
Request bodies for the public, auth and cart routers.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from foodcart.models import OrderType


class LoginRequest(BaseModel):
    username: str
    password: str


class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=3)
    password: str = Field(min_length=1)


# ==================== CART ====================

class AddToCartRequest(BaseModel):
    food_item_id: str
    quantity: int = Field(default=1, ge=1)
    addon_ids: list[str] = []


class UpdateCartItemRequest(BaseModel):
    id: str
    quantity: int
    addon_ids: Optional[list[str]] = None


# ==================== ORDERS ====================

class OrderDetails(BaseModel):
    """Delivery / pickup / table details (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    address: Optional[str] = None
    table_number: Optional[str] = None
    people: Optional[int] = None
    phone: str = ""
    instructions: str = ""


class CheckoutRequest(BaseModel):
    type: OrderType = OrderType.DELIVERY
    details: OrderDetails = OrderDetails()


class CreateOrderRequest(BaseModel):
    """Raw order document posted by the client (camelCase keys)."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="ignore")

    type: OrderType = OrderType.DELIVERY
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    items: list[dict] = []
    total: float = 0
    details: dict = {}
    date: Optional[str] = None
