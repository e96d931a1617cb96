"""
Tests for the database facade, repositories and domains
"""

from decimal import Decimal

import pytest

import foodcart.database as database_module
from foodcart.database import Database, get_database, is_database_initialized
from foodcart.domains import DEFAULT_CATEGORIES, UserAlreadyExistsError


class TestDatabaseSingleton:
    def test_get_database_requires_init(self, monkeypatch):
        monkeypatch.setattr(database_module, "_db", None)
        assert not is_database_initialized()
        with pytest.raises(RuntimeError):
            get_database()

    def test_get_database_returns_injected(self, database):
        assert get_database() is database

    @pytest.mark.asyncio
    async def test_create_requires_credentials(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        with pytest.raises(ValueError):
            await Database.create()


class TestRepositories:
    """BaseRepository CRUD over the fake client."""

    @pytest.mark.asyncio
    async def test_crud(self, database):
        created = await database.restaurants.create({"name": "Paradise", "rating": 4.5})
        assert created.id

        fetched = await database.restaurants.get_by_id(created.id)
        assert fetched.name == "Paradise"

        updated = await database.restaurants.update(created.id, {"rating": 4.9})
        assert updated.rating == 4.9

        assert await database.restaurants.count() == 1
        assert await database.restaurants.delete(created.id)
        assert not await database.restaurants.delete(created.id)
        assert await database.restaurants.update(created.id, {"rating": 1}) is None

    @pytest.mark.asyncio
    async def test_food_item_queries(self, database, seeded_catalog):
        trending = await database.food_items.get_trending()
        assert {i.id for i in trending} == {"food-1", "food-3"}

        best = await database.food_items.get_best_reviewed()
        assert [i.id for i in best] == ["food-2", "food-1", "food-3"]

        menu = await database.food_items.get_by_restaurant(1)
        assert {i.id for i in menu} == {"food-1", "food-3"}

    @pytest.mark.asyncio
    async def test_orders_by_user_newest_first(self, database, fake_supabase):
        fake_supabase.tables["orders"] = [
            {"id": "o1", "user_id": "u1", "total": 100, "created_at": "2025-01-01T00:00:00+00:00"},
            {"id": "o2", "user_id": "u1", "total": 50.5, "created_at": "2025-02-01T00:00:00+00:00"},
            {"id": "o3", "user_id": "u2", "total": 10, "created_at": "2025-03-01T00:00:00+00:00"},
        ]
        orders = await database.orders.get_by_user("u1")
        assert [o.id for o in orders] == ["o2", "o1"]
        assert await database.orders.total_revenue() == Decimal("160.5")


class TestUsersDomain:
    @pytest.mark.asyncio
    async def test_signup_and_authenticate_by_email_or_phone(self, database, fake_supabase):
        user = await database.users_domain.signup("Asha", "asha@example.com", "9876543210", "pw")
        assert user.role.value == "user"
        assert fake_supabase.tables["users"][0]["password_hash"] != "pw"

        assert (await database.users_domain.authenticate("asha@example.com", "pw")).id == user.id
        assert (await database.users_domain.authenticate("9876543210", "pw")).id == user.id
        assert await database.users_domain.authenticate("asha@example.com", "bad") is None
        assert await database.users_domain.authenticate("ghost@example.com", "pw") is None

    @pytest.mark.asyncio
    async def test_duplicate_signup(self, database):
        await database.users_domain.signup("Asha", "asha@example.com", "1", "pw")
        with pytest.raises(UserAlreadyExistsError):
            await database.users_domain.signup("Other", "other@example.com", "1", "pw")

    @pytest.mark.asyncio
    async def test_password_never_serialized(self, database):
        user = await database.users_domain.create_by_admin({"name": "Ravi", "email": "r@x.in", "password": "pw"})
        assert "passwordHash" not in user.to_api()
        assert "password_hash" not in user.to_api()


class TestCatalogDomain:
    @pytest.mark.asyncio
    async def test_menu(self, database, seeded_catalog):
        menu = await database.catalog_domain.get_menu("1")
        assert menu["categories"] == ["Biryani", "Desserts"]

    @pytest.mark.asyncio
    async def test_public_categories(self, database, seeded_catalog):
        categories = await database.catalog_domain.get_categories()
        assert [(c["id"], c["name"]) for c in categories] == [("1", "Biryani"), ("2", "Pizza"), ("3", "Desserts")]

    @pytest.mark.asyncio
    async def test_admin_categories_merge_defaults(self, database, fake_supabase):
        fake_supabase.tables["food_items"] = [{"id": "f", "name": "Momo", "price": 90, "category": "Tibetan"}]
        categories = await database.catalog_domain.get_admin_categories()
        assert categories == sorted(set(DEFAULT_CATEGORIES) | {"Tibetan"})
