"""API v1 router aggregation."""

from fastapi import APIRouter

from barlog.api.v1.endpoints import (
    barbells,
    health,
    loadout,
    logs,
    plates,
    preferences,
    watch,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(barbells.router, prefix="/barbells", tags=["barbells"])
api_router.include_router(plates.router, prefix="/plates", tags=["plates"])
api_router.include_router(loadout.router, prefix="/loadout", tags=["loadout"])
api_router.include_router(logs.router, prefix="/logs", tags=["logs"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(watch.router, prefix="/watch", tags=["watch"])
