"""
Router package for the Stretch Routine API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- routines: Intent parsing and routine generation
- settings: Persisted routine preferences
"""

from api.routers.health import router as health_router
from api.routers.routines import router as routines_router
from api.routers.settings import router as settings_router

__all__ = [
    "health_router",
    "routines_router",
    "settings_router",
]
