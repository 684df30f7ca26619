"""
API v1 Router
Aggregates all API v1 route modules
"""

from fastapi import APIRouter
from .routes_integrations import router as integrations_router

# Create main v1 router
api_v1_router = APIRouter(prefix="/api/v1")

# Include all sub-routers
api_v1_router.include_router(integrations_router)

__all__ = ["api_v1_router"]
