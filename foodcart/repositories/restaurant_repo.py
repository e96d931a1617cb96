"""Restaurant Repository."""
from foodcart.models import Restaurant

from .base import BaseRepository


class RestaurantRepository(BaseRepository[Restaurant]):
    """Restaurant database operations."""

    table = "restaurants"
    model = Restaurant
