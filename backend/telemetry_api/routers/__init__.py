"""
Route composition: users plus one CRUD router per telemetry kind.
"""

from fastapi import APIRouter

from telemetry_api.resources import RESOURCES
from telemetry_api.routers.resources import build_resource_router
from telemetry_api.routers.users import router as users_router

api_router = APIRouter()
api_router.include_router(users_router, prefix="/users")

for _resource in RESOURCES:
    api_router.include_router(build_resource_router(_resource), prefix=f"/{_resource.kind}")

__all__ = ["api_router"]
