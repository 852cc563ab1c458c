"""Mount all API routes."""

from fastapi import APIRouter

from blogmark.api.preview import router as preview_router

api_router = APIRouter()
api_router.include_router(preview_router, tags=["preview"])
