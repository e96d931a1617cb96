"""Database Models - Pydantic models for all entities.

Columns are snake_case in the database; API payloads use the camelCase
names the mobile client and admin panel expect (restaurantId, isTrending...).
Both spellings are accepted on input.
"""
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from foodcart.money import to_decimal as _to_decimal, to_float


class OrderStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PREPARING = "Preparing"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


ACTIVE_ORDER_STATUSES = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.OUT_FOR_DELIVERY,
)


class OrderType(str, Enum):
    DELIVERY = "delivery"
    TAKEAWAY = "takeaway"
    DINE_IN = "dine-in"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class ApiModel(BaseModel):
    """Base for entities: ignore unknown DB columns, camelCase aliases."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)

    def to_api(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class User(ApiModel):
    """App user (customer)."""
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    password_hash: Optional[str] = Field(default=None, exclude=True)
    role: UserRole = UserRole.USER
    signup_date: Optional[str] = None
    created_at: Optional[str] = None


class Restaurant(ApiModel):
    """Restaurant model."""
    id: str
    name: str
    rating: float = 0
    delivery_time: Optional[str] = None
    image: Optional[str] = None
    cuisine: list[str] = []
    distance: Optional[str] = None


class FoodItem(ApiModel):
    """Menu item served by a restaurant."""
    id: str
    name: str
    price: Decimal
    image: Optional[str] = None
    rating: float = 0
    category: Optional[str] = None
    description: Optional[str] = None
    is_trending: bool = False
    restaurant_id: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("restaurant_id", mode="before")
    @classmethod
    def restaurant_id_as_string(cls, v):
        return str(v) if v is not None else None

    @field_serializer("price")
    def serialize_price(self, v: Decimal) -> float:
        return to_float(v)


class Order(ApiModel):
    """Placed order: a finalized cart snapshot plus delivery details."""
    id: str
    type: OrderType = OrderType.DELIVERY
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    items: list[dict[str, Any]] = []
    total: Decimal = Decimal("0")
    details: dict[str, Any] = {}
    date: Optional[str] = None
    status: str = OrderStatus.PENDING.value
    created_at: Optional[str] = None

    @field_validator("total", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)

    @field_serializer("total")
    def serialize_total(self, v: Decimal) -> float:
        return to_float(v)

    @property
    def is_active(self) -> bool:
        return self.status in {s.value for s in ACTIVE_ORDER_STATUSES}
