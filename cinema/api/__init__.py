"""API routers."""

from cinema.api.router import api_router

__all__ = ["api_router"]
