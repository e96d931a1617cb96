"""
Supabase Database Service

Database facade holding repositories and domain services.

Usage:
    from foodcart.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    menu = await db.catalog_domain.get_menu(restaurant_id)
"""

import asyncio
import os
from typing import Optional

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from foodcart.domains import CatalogDomain, OrdersDomain, UsersDomain
from foodcart.logging import get_logger
from foodcart.repositories import (
    FoodItemRepository,
    OrderRepository,
    RestaurantRepository,
    UserRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase database client with repositories and domains.

    Must be initialized via async factory method `create()` or `init_database()`.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self.users = UserRepository(self.client)
        self.restaurants = RestaurantRepository(self.client)
        self.food_items = FoodItemRepository(self.client)
        self.orders = OrderRepository(self.client)

        self.users_domain = UsersDomain(self.users)
        self.catalog_domain = CatalogDomain(self.restaurants, self.food_items)
        self.orders_domain = OrdersDomain(self.orders)

    @classmethod
    async def create(cls) -> "Database":
        """Create the async Supabase client from SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY."""
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        client = await acreate_client(url, key)
        return cls(client)


_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize async database singleton (FastAPI lifespan or lazily)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton; called at FastAPI shutdown."""
    global _db
    if _db is not None:
        try:
            await _db.client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Error closing Supabase client: {e}")
        _db = None
        logger.info("Supabase client closed")


async def get_database_async() -> Database:
    """Get database instance, initializing on first use."""
    if _db is None:
        return await init_database()
    return _db


def get_database() -> Database:
    """
    Get database instance (sync accessor).

    Raises:
        RuntimeError: If database not initialized
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Use 'await get_database_async()' for lazy init, "
            "or call 'await init_database()' at startup."
        )
    return _db


def is_database_initialized() -> bool:
    return _db is not None
