"""
Infrastructure layer for the stretch routine API.

This package contains concrete implementations of the port interfaces:
- JsonCatalogRepository: static stretch catalog asset
- YamlSettingsStore: persisted transition duration
- StaticEntitlementProvider: premium allow-list from settings
"""

from infrastructure.json_catalog_repository import JsonCatalogRepository
from infrastructure.static_entitlement_provider import StaticEntitlementProvider
from infrastructure.yaml_settings_store import YamlSettingsStore

__all__ = [
    "JsonCatalogRepository",
    "StaticEntitlementProvider",
    "YamlSettingsStore",
]
