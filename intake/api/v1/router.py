"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from intake.api.v1.dependencies (no manual repo/use case construction).
"""

from fastapi import APIRouter

from intake.api.v1.endpoints import health, services

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
