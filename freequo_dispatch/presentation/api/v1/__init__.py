"""API v1 routers.

Resources:
    /api/v1/triggers   - Record creation triggers
    /api/v1/payments   - Checkout orders and confirmations
"""

from fastapi import APIRouter

from freequo_dispatch.presentation.api.v1.payments import router as payments_router
from freequo_dispatch.presentation.api.v1.triggers import router as triggers_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(triggers_router)
v1_router.include_router(payments_router)

__all__ = ["v1_router"]
