"""Pytest configuration and fixtures"""
import copy
import os
import uuid
from types import SimpleNamespace
from typing import Any, Optional

import pytest

# Set test environment variables (before foodcart modules read them)
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-secret")


# ==================== FAKE SUPABASE ====================

class FakeQuery:
    """Chainable in-memory stand-in for a Supabase table query."""

    def __init__(self, tables: dict[str, list[dict]], name: str):
        self._rows = tables.setdefault(name, [])
        self._op = "select"
        self._columns = "*"
        self._count: Optional[str] = None
        self._payload: Any = None
        self._filters: list[tuple[str, Any]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._range: Optional[tuple[int, int]] = None

    def select(self, columns: str = "*", count: Optional[str] = None):
        self._op, self._columns, self._count = "select", columns, count
        return self

    def insert(self, data):
        self._op, self._payload = "insert", data
        return self

    def update(self, data):
        self._op, self._payload = "update", data
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column: str, value):
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False):
        self._order = (column, desc)
        return self

    def range(self, start: int, end: int):
        self._range = (start, end)
        return self

    def limit(self, n: int):
        self._range = (0, n - 1)
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def _project(self, row: dict) -> dict:
        if self._columns.strip() == "*":
            return copy.deepcopy(row)
        names = [c.strip() for c in self._columns.split(",")]
        return {name: copy.deepcopy(row.get(name)) for name in names}

    async def execute(self):
        if self._op == "insert":
            payloads = self._payload if isinstance(self._payload, list) else [self._payload]
            inserted = []
            for payload in payloads:
                row = {"id": str(uuid.uuid4()), **copy.deepcopy(payload)}
                self._rows.append(row)
                inserted.append(copy.deepcopy(row))
            return SimpleNamespace(data=inserted, count=None)

        matched = [row for row in self._rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return SimpleNamespace(data=[copy.deepcopy(r) for r in matched], count=None)

        if self._op == "delete":
            for row in matched:
                self._rows.remove(row)
            return SimpleNamespace(data=matched, count=None)

        if self._order:
            column, desc = self._order
            present = [r for r in matched if r.get(column) is not None]
            missing = [r for r in matched if r.get(column) is None]
            matched = sorted(present, key=lambda r: r[column], reverse=desc) + missing
        if self._range:
            start, end = self._range
            matched = matched[start:end + 1]

        count = len(matched) if self._count else None
        return SimpleNamespace(data=[self._project(r) for r in matched], count=count)


class FakeSupabaseClient:
    """Async Supabase client over plain dict tables."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.tables, name)


# ==================== FAKE REDIS ====================

class FakeRedis:
    """Async subset of the Upstash Redis client used by the cart."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttl: dict[str, Optional[int]] = {}

    async def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    async def set(self, key: str, value: str, ex: Optional[int] = None):
        self.store[key] = value
        self.ttl[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttl.pop(key, None)
        return removed


# ==================== FIXTURES ====================

@pytest.fixture
def fake_supabase():
    return FakeSupabaseClient()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def database(fake_supabase, monkeypatch):
    """Database singleton backed by the in-memory client"""
    import foodcart.database as database_module
    from foodcart.database import Database

    db = Database(fake_supabase)
    monkeypatch.setattr(database_module, "_db", db)
    return db


@pytest.fixture
def cart_manager(fake_redis, monkeypatch):
    """Router-level CartManager using fake Redis, subscribed to session events"""
    from foodcart.cart import CartManager
    from foodcart.routers import deps

    deps.reset_services()
    manager = CartManager(session_events=deps.get_session_events(), redis=fake_redis)
    monkeypatch.setattr(deps, "_cart_manager", manager)
    yield manager
    deps.reset_services()


@pytest.fixture(autouse=True)
def clear_sessions():
    from foodcart.auth import session

    session._web_sessions.clear()
    yield
    session._web_sessions.clear()


@pytest.fixture
def client(database, cart_manager):
    """FastAPI TestClient (lifespan not run; singletons are injected)"""
    from fastapi.testclient import TestClient
    from api.index import app

    return TestClient(app)


@pytest.fixture
def admin_headers():
    from foodcart.auth import ADMIN_USER_ID, create_web_session

    token = create_web_session(ADMIN_USER_ID, "admin", "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_auth_headers():
    """Factory: bearer headers for a customer session"""
    from foodcart.auth import create_web_session

    def _make(user_id: str, name: str = "Test User") -> dict[str, str]:
        token = create_web_session(user_id, name, "user")
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def user_headers(make_auth_headers):
    return make_auth_headers("user-123")


@pytest.fixture
def sample_food_item():
    """Catalog row as stored in the food_items table"""
    return {
        "id": "food-1",
        "name": "Chicken Biryani",
        "price": 250,
        "image": "https://example.com/biryani.jpg",
        "rating": 4.6,
        "category": "Biryani",
        "description": "Hyderabadi dum biryani",
        "is_trending": True,
        "restaurant_id": "1",
    }


@pytest.fixture
def seeded_catalog(fake_supabase, sample_food_item):
    """Two restaurants and a handful of menu items"""
    fake_supabase.tables["restaurants"] = [
        {"id": "1", "name": "Paradise", "rating": 4.5, "delivery_time": "30 min", "cuisine": ["Indian"]},
        {"id": "2", "name": "Pizza Hub", "rating": 4.1, "delivery_time": "25 min", "cuisine": ["Italian"]},
    ]
    fake_supabase.tables["food_items"] = [
        dict(sample_food_item),
        {
            "id": "food-2", "name": "Margherita Pizza", "price": 299, "rating": 4.8,
            "category": "Pizza", "is_trending": False, "restaurant_id": "2",
        },
        {
            "id": "food-3", "name": "Gulab Jamun", "price": 80, "rating": 4.2,
            "category": "Desserts", "is_trending": True, "restaurant_id": "1",
        },
    ]
    return fake_supabase
