"""Domain services wrapping repositories."""
from .users import UsersDomain, UserAlreadyExistsError, check_admin_credentials
from .catalog import CatalogDomain, DEFAULT_CATEGORIES
from .orders import OrdersDomain

__all__ = [
    "UsersDomain",
    "UserAlreadyExistsError",
    "check_admin_credentials",
    "CatalogDomain",
    "DEFAULT_CATEGORIES",
    "OrdersDomain",
]
