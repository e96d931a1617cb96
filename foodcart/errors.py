"""
Common Error Constants and Exceptions

Centralized error messages shared by routers and services.
"""

# Auth errors
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_INVALID_CREDENTIALS = "Invalid username or password"
ERROR_INVALID_SESSION = "Invalid session token"
ERROR_ADMIN_REQUIRED = "Admin access required"

# User errors
ERROR_USER_NOT_FOUND = "User not found"
ERROR_USER_EXISTS = "A user with this email or phone already exists"

# Catalog errors
ERROR_RESTAURANT_NOT_FOUND = "Restaurant not found"
ERROR_FOOD_ITEM_NOT_FOUND = "Food item not found"
ERROR_RESTAURANT_ID_REQUIRED = "Restaurant ID is required"

# Order errors
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_ORDER_INVALID_STATUS = "Invalid order status"
ERROR_CART_EMPTY = "Cart is empty"

# Generic errors
ERROR_INTERNAL = "Internal server error"
ERROR_SERVICE_UNAVAILABLE = "Service temporarily unavailable"


class CartUnavailableError(Exception):
    """Cart storage (Redis) could not be reached or written."""


class EmptyCartError(Exception):
    """Checkout was requested for a cart without line items."""
