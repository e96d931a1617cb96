"""HTTP routers."""
from .admin import router as admin_router
from .auth import router as auth_router
from .cart import router as cart_router
from .catalog import router as catalog_router
from .orders import router as orders_router

__all__ = ["admin_router", "auth_router", "cart_router", "catalog_router", "orders_router"]
