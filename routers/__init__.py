# routers/__init__.py

from .auth import router as auth_router
from .navigation import router as navigation_router
from .health import router as health_router
from .dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "navigation_router",
    "health_router",
    "dashboard_router",
]
