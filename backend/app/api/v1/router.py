"""API v1 router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import applications, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    applications.router,
    prefix="/applications",
    tags=["applications"],
)
