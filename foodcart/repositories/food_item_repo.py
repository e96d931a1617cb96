"""Food Item Repository - menu items and catalog listings."""
from foodcart.models import FoodItem

from .base import BaseRepository


class FoodItemRepository(BaseRepository[FoodItem]):
    """Food item database operations."""

    table = "food_items"
    model = FoodItem

    async def get_by_restaurant(self, restaurant_id: str) -> list[FoodItem]:
        result = await self._query().select("*").eq("restaurant_id", str(restaurant_id)).execute()
        return [FoodItem(**row) for row in result.data or []]

    async def get_trending(self) -> list[FoodItem]:
        result = await self._query().select("*").eq("is_trending", True).execute()
        return [FoodItem(**row) for row in result.data or []]

    async def get_best_reviewed(self) -> list[FoodItem]:
        return await self.list_all(order_by="rating", desc=True)
