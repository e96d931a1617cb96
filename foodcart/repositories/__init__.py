"""
Repository Pattern for Database Operations

- UserRepository: users, login lookups
- RestaurantRepository: restaurants
- FoodItemRepository: menu items, trending / best reviewed
- OrderRepository: orders, status, revenue
"""
from .base import BaseRepository
from .user_repo import UserRepository
from .restaurant_repo import RestaurantRepository
from .food_item_repo import FoodItemRepository
from .order_repo import OrderRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RestaurantRepository",
    "FoodItemRepository",
    "OrderRepository",
]
