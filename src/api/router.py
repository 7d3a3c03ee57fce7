from fastapi import APIRouter

from .health import router as health_router
from .pages import router as pages_router


api_router = APIRouter()

api_router.include_router(pages_router, tags=["pages"])
api_router.include_router(health_router, tags=["health"])
