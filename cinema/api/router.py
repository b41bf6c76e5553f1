"""Main API router."""

from fastapi import APIRouter

from cinema.api.movies import router as movies_router

api_router = APIRouter(prefix="/api")

api_router.include_router(movies_router, prefix="/movies", tags=["movies"])
