"""Cart models with Decimal-based pricing.

All models are frozen: a cart changes only by building a new CartState.
"""
from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional

from foodcart.money import to_decimal, multiply


@dataclass(frozen=True)
class AddOn:
    """Optional priced extra attached to a line item (e.g. extra cheese)."""
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    @property
    def identity(self) -> tuple[str, Decimal]:
        """What makes two add-ons the same for merging: id and price."""
        return (self.id, self.price)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "price": str(self.price)}

    @classmethod
    def from_dict(cls, data: dict) -> "AddOn":
        return cls(id=str(data["id"]), name=data.get("name", ""), price=to_decimal(data.get("price")))


def same_addons(left: Iterable[AddOn], right: Iterable[AddOn]) -> bool:
    """Order-insensitive add-on comparison by (id, price)."""
    return Counter(a.identity for a in left) == Counter(a.identity for a in right)


@dataclass(frozen=True)
class LineItem:
    """
    One cart entry: a product plus a specific add-on selection and a quantity.

    The same product id can appear on several lines when their add-on
    selections differ.
    """
    id: str
    name: str
    unit_price: Decimal
    quantity: int
    image: str = ""
    addons: tuple[AddOn, ...] = field(default_factory=tuple)
    restaurant_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price))
        object.__setattr__(self, "addons", tuple(self.addons))

    @property
    def addon_total(self) -> Decimal:
        """Sum of selected add-on prices for a single unit."""
        return sum((addon.price for addon in self.addons), Decimal("0"))

    @property
    def unit_total(self) -> Decimal:
        """Price of one unit including add-ons."""
        return self.unit_price + self.addon_total

    @property
    def line_total(self) -> Decimal:
        """Contribution of this line to the cart total."""
        return multiply(self.unit_total, self.quantity)

    def has_addons(self, addons: Iterable[AddOn]) -> bool:
        return same_addons(self.addons, addons)

    def to_dict(self) -> dict:
        """Serialize for Redis storage (prices kept as exact strings)."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "price": str(self.unit_price),
            "quantity": self.quantity,
            "addons": [addon.to_dict() for addon in self.addons],
            "restaurantId": self.restaurant_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            image=data.get("image") or "",
            unit_price=to_decimal(data["price"]),
            quantity=int(data["quantity"]),
            addons=tuple(AddOn.from_dict(a) for a in data.get("addons") or []),
            restaurant_id=data.get("restaurantId"),
        )


@dataclass(frozen=True)
class CartState:
    """Line items plus the derived totals kept in step with them."""
    items: tuple[LineItem, ...] = ()
    total_items: int = 0
    total_price: Decimal = Decimal("0")

    @classmethod
    def from_items(cls, items: Iterable[LineItem]) -> "CartState":
        """Build a state with totals computed from scratch."""
        items = tuple(item for item in items if item.quantity > 0)
        return cls(
            items=items,
            total_items=sum(item.quantity for item in items),
            total_price=sum((item.line_total for item in items), Decimal("0")),
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "totalItems": self.total_items,
            "totalPrice": str(self.total_price),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartState":
        """Restore from storage; totals are recomputed rather than trusted."""
        return cls.from_items(LineItem.from_dict(item) for item in data.get("items", []))


EMPTY_CART = CartState()
