"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.categories import router as categories_router
from src.api.routers.classify import router as classify_router

api_router = APIRouter()

api_router.include_router(classify_router, tags=["classify"])
api_router.include_router(categories_router, tags=["categories"])
