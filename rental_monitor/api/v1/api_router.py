from fastapi import APIRouter

from rental_monitor.api.v1.health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router, prefix="/health", tags=["health"])
