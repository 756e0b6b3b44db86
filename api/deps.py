"""
FastAPI Dependency Providers for the Stretch Routine API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and the catalog repository are cached per-process (lru_cache)
- Settings store and entitlement provider are created per-request
- The requesting user is read from the X-User-Id header

Usage in routers:
    from api.deps import get_catalog_repo, get_optional_user
    from application.ports import CatalogRepository

    @router.get("/stretches")
    def list_stretches(
        catalog_repo: CatalogRepository = Depends(get_catalog_repo),
    ):
        return catalog_repo.get_all()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_catalog_repo] = lambda: FakeCatalogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from application.ports import CatalogRepository, EntitlementProvider, SettingsStore
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import (
    JsonCatalogRepository,
    StaticEntitlementProvider,
    YamlSettingsStore,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def _catalog_repo_for(path: str) -> JsonCatalogRepository:
    return JsonCatalogRepository(path)


def get_catalog_repo(
    settings: Settings = Depends(get_settings),
) -> CatalogRepository:
    """
    Get CatalogRepository implementation.

    The catalog is a static asset, so one repository (and one parsed copy
    of the file) is shared per catalog path.

    Returns:
        CatalogRepository: Read-only stretch catalog
    """
    return _catalog_repo_for(str(settings.catalog_path))


def get_settings_store(
    settings: Settings = Depends(get_settings),
) -> SettingsStore:
    """
    Get SettingsStore implementation.

    Returns:
        SettingsStore: YAML-backed persisted settings
    """
    return YamlSettingsStore(
        settings.user_settings_path,
        default_transition_duration=settings.default_transition_duration,
    )


def get_entitlement_provider(
    settings: Settings = Depends(get_settings),
) -> EntitlementProvider:
    """
    Get EntitlementProvider implementation.

    Returns:
        EntitlementProvider: Premium allow-list from settings
    """
    return StaticEntitlementProvider(settings.premium_user_id_set)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_optional_user(
    x_user_id: Optional[str] = Header(None),
) -> Optional[str]:
    """
    Get the requesting user ID if one was sent, None otherwise.

    Anonymous requests can generate routines but are never entitled to
    premium stretches.

    Args:
        x_user_id: User ID header

    Returns:
        Optional[str]: User ID, or None for anonymous requests
    """
    if not x_user_id or not x_user_id.strip():
        return None
    return x_user_id.strip()


# =============================================================================
# Exports
# =============================================================================

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
