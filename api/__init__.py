"""
API package for the Stretch Routine API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_catalog_repo,
    get_entitlement_provider,
    get_optional_user,
    get_settings,
    get_settings_store,
)

__all__ = [
    # Settings
    "get_settings",
    # Repositories
    "get_catalog_repo",
    "get_settings_store",
    "get_entitlement_provider",
    # Authentication
    "get_optional_user",
]
