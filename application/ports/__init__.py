"""
Port interfaces (Protocols) for the stretch routine API.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.catalog_repository import CatalogRepository
from application.ports.entitlement_provider import EntitlementProvider
from application.ports.settings_store import SettingsStore

__all__ = [
    "CatalogRepository",
    "EntitlementProvider",
    "SettingsStore",
]
