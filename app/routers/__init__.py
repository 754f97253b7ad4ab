"""API routers."""

from .trigger import router as trigger_router

__all__ = ["trigger_router"]
