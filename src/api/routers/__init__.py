"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.consult import router as consult_router
from src.api.routers.health import router as health_router

api_router = APIRouter()

api_router.include_router(consult_router, tags=["consult"])
api_router.include_router(health_router, tags=["health"])
