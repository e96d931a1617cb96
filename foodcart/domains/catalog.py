"""Catalog domain: restaurants, menus and categories."""
from typing import Any

from foodcart.models import FoodItem
from foodcart.repositories import FoodItemRepository, RestaurantRepository

DEFAULT_CATEGORY_IMAGE = "https://images.unsplash.com/photo-1513104890138-7c749659a591?w=100&h=100&fit=crop"

DEFAULT_CATEGORIES = (
    "Pizza", "Salads", "Sides", "Desserts", "Drinks",
    "Indian", "Chinese", "Mexican", "Ice Creams",
    "Milk Shakes", "Burgers", "Appetizers", "Biryani",
    "Noodles", "Sandwiches", "Pasta",
)


def unique_categories(items: list[FoodItem]) -> list[str]:
    """Distinct non-empty categories, first-seen order."""
    return list(dict.fromkeys(item.category for item in items if item.category))


class CatalogDomain:
    """Read side of the catalog used by the app and the admin panel."""

    def __init__(self, restaurants: RestaurantRepository, food_items: FoodItemRepository) -> None:
        self.restaurants = restaurants
        self.food_items = food_items

    async def get_menu(self, restaurant_id: str) -> dict[str, Any]:
        """Items of one restaurant plus their categories."""
        items = await self.food_items.get_by_restaurant(restaurant_id)
        return {"items": items, "categories": unique_categories(items)}

    async def get_categories(self) -> list[dict[str, str]]:
        items = await self.food_items.list_all()
        return [
            {"id": str(index + 1), "name": name, "image": DEFAULT_CATEGORY_IMAGE}
            for index, name in enumerate(unique_categories(items))
        ]

    async def get_admin_categories(self) -> list[str]:
        """Default categories merged with those in use, sorted."""
        items = await self.food_items.list_all()
        return sorted(set(DEFAULT_CATEGORIES) | set(unique_categories(items)))
