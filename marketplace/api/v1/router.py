"""
API v1 router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from marketplace.api.v1.endpoints import ads, auth, health

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(ads.router, prefix="/ads", tags=["ads"])
