"""
Add-on menus for catalog items.

The menu offered with a food item is picked by a coarse match on its
category and name. Building the candidate LineItem from a catalog record
happens here, before the cart ever sees it.
"""
from typing import Iterable, Optional

from .models import AddOn, LineItem

BIRYANI_ADDONS = (
    AddOn("1", "Extra Raita", 20),
    AddOn("2", "Double Masala", 30),
    AddOn("3", "Thums Up (250ml)", 40),
    AddOn("4", "Boiled Egg", 15),
)

PIZZA_ADDONS = (
    AddOn("1", "Extra Cheese", 40),
    AddOn("2", "Cheese Burst", 60),
    AddOn("3", "Coke (250ml)", 40),
    AddOn("4", "Choco Lava Cake", 90),
)

BURGER_ADDONS = (
    AddOn("1", "Extra Cheese Slice", 20),
    AddOn("2", "Peri Peri Fries", 80),
    AddOn("3", "Coke (250ml)", 40),
    AddOn("4", "Chicken Nuggets (4pc)", 120),
)

DESSERT_ADDONS = (
    AddOn("1", "Extra Chocolate Sauce", 30),
    AddOn("2", "Nut Toppings", 40),
    AddOn("3", "Vanilla Scoop", 50),
)

DEFAULT_ADDONS = (
    AddOn("1", "Extra Cheese", 20),
    AddOn("2", "Cold Drink", 30),
    AddOn("3", "Fries", 40),
    AddOn("4", "Sauce Pack", 15),
)


def addons_for_product(category: Optional[str] = "", name: Optional[str] = "") -> list[AddOn]:
    """Return the add-on menu for a food item (first matching rule wins)."""
    category = (category or "").lower()
    name = (name or "").lower()

    if "biryani" in category or "rice" in category or "biryani" in name:
        return list(BIRYANI_ADDONS)
    if "pizza" in category or "pizza" in name:
        return list(PIZZA_ADDONS)
    if "burger" in category or "sandwich" in category or "burger" in name:
        return list(BURGER_ADDONS)
    if "dessert" in category or "ice cream" in category or "cake" in category:
        return list(DESSERT_ADDONS)
    return list(DEFAULT_ADDONS)


def select_addons(menu: Iterable[AddOn], addon_ids: Iterable[str]) -> tuple[AddOn, ...]:
    """
    Pick add-ons from a menu by id, in menu order.

    Raises:
        ValueError: if an id is not on the menu
    """
    menu = list(menu)
    wanted = set(addon_ids)
    known = {addon.id for addon in menu}
    unknown = wanted - known
    if unknown:
        raise ValueError(f"Unknown add-on(s): {', '.join(sorted(unknown))}")
    return tuple(addon for addon in menu if addon.id in wanted)


def build_line_item(food_item, quantity: int = 1, addon_ids: Iterable[str] = ()) -> LineItem:
    """
    Build a candidate line item from a catalog record.

    Args:
        food_item: FoodItem (or anything with id, name, price, image,
            category and restaurant_id attributes)
        quantity: Units to add, must be at least 1
        addon_ids: Ids of selected add-ons from the item's menu

    Raises:
        ValueError: on a non-positive quantity or an unknown add-on id
    """
    if quantity < 1:
        raise ValueError("quantity must be a positive integer")

    menu = addons_for_product(getattr(food_item, "category", None), food_item.name)
    return LineItem(
        id=str(food_item.id),
        name=food_item.name,
        image=getattr(food_item, "image", None) or "",
        unit_price=food_item.price,
        quantity=quantity,
        addons=select_addons(menu, addon_ids),
        restaurant_id=getattr(food_item, "restaurant_id", None),
    )
