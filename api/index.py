"""
FoodCart - Main FastAPI Application

Single entry point for the mobile app and admin panel APIs.
"""
import os
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Project root on sys.path for serverless deployments
_base_path = Path(__file__).parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from foodcart.database import close_database, init_database
from foodcart.logging import get_logger
from foodcart.routers import admin_router, auth_router, cart_router, catalog_router, orders_router
from foodcart.routers.deps import reset_services

logger = get_logger(__name__)

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    try:
        await init_database()
    except ValueError as e:
        # Missing credentials: routes needing the database will fail until configured
        logger.error(f"Database not initialized: {e}")
    yield
    reset_services()
    await close_database()


app = FastAPI(
    title="FoodCart",
    description="Food ordering API: catalog, cart, checkout and admin panel",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router, prefix="/api")
app.include_router(orders_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


@app.get("/api/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
