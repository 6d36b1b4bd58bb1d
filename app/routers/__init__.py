"""Routers package - API endpoint routers."""

from .health import router as health_router
from .logs import router as logs_router

__all__ = [
    "health_router",
    "logs_router",
]
