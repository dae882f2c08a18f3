"""HTTP routes."""

from fastapi import APIRouter

from app.api import accounts, health, orders

router = APIRouter()
router.include_router(accounts.router, tags=["accounts"])
router.include_router(orders.router, tags=["orders"])
router.include_router(health.router, prefix="/health", tags=["health"])
