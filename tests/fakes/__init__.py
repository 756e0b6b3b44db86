"""
Fake implementations for testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing without touching the filesystem.
"""

from tests.fakes.catalog_repository import (
    FailingCatalogRepository,
    FakeCatalogRepository,
    make_stretch,
)
from tests.fakes.entitlement_provider import FakeEntitlementProvider
from tests.fakes.settings_store import FakeSettingsStore

__all__ = [
    "FakeCatalogRepository",
    "FailingCatalogRepository",
    "FakeEntitlementProvider",
    "FakeSettingsStore",
    "make_stretch",
]
