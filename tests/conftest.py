"""
Pytest fixtures for stretch-routine-api tests.
"""

import random
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_catalog_repo, get_entitlement_provider, get_settings_store
from api.routers.routines import get_rng
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeCatalogRepository, FakeEntitlementProvider, FakeSettingsStore


TEST_USER_ID = "test-user-123"
PREMIUM_USER_ID = "premium-user-456"
TEST_SEED = 1234


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", log_level="DEBUG", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_catalog_repo() -> FakeCatalogRepository:
    """Fake catalog seeded with the twenty-stretch test catalog."""
    repo = FakeCatalogRepository()
    repo.seed_default_stretches()
    return repo


@pytest.fixture
def fake_settings_store() -> FakeSettingsStore:
    return FakeSettingsStore(transition_duration=5)


@pytest.fixture
def fake_entitlements() -> FakeEntitlementProvider:
    return FakeEntitlementProvider(premium_user_ids=[PREMIUM_USER_ID])


@pytest.fixture
def client(
    app,
    fake_catalog_repo,
    fake_settings_store,
    fake_entitlements,
) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient wired to fakes and a seeded random generator.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_catalog_repo] = lambda: fake_catalog_repo
    app.dependency_overrides[get_settings_store] = lambda: fake_settings_store
    app.dependency_overrides[get_entitlement_provider] = lambda: fake_entitlements
    app.dependency_overrides[get_rng] = lambda: random.Random(TEST_SEED)
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Keep the developer's environment out of Settings()."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("PREMIUM_USER_IDS", raising=False)
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(TEST_SEED)
