"""Root pytest configuration for swift-objects tests."""
import pytest

from swift_objects.account import Account
from swift_objects.settings import Settings
from swift_objects.storage.endpoints import CatalogEndpointResolver
from tests.storage.fakes import FakeTransport

PUBLIC_URL = "https://storage101.iad3.clouddrive.com/v1/MossoCloudFS_test"
CDN_URL = "https://cdn1.clouddrive.com/v1/MossoCloudFS_test"


# Set up test environment variables
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically set up test environment variables."""
    monkeypatch.setenv("SWIFT_STORAGE_URL", PUBLIC_URL)
    monkeypatch.delenv("SWIFT_URL_TYPE", raising=False)
    monkeypatch.delenv("SWIFT_CDN_URL", raising=False)


# Standardized test fixtures
@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(storage_url=PUBLIC_URL)


@pytest.fixture
def transport():
    """Recording fake transport."""
    return FakeTransport()


@pytest.fixture
def account(transport):
    """Account configured for public URLs."""
    return Account(transport, CatalogEndpointResolver(PUBLIC_URL))


@pytest.fixture
def internal_account(transport):
    """Account configured for internal (ServiceNet) URLs."""
    return Account(transport, CatalogEndpointResolver(PUBLIC_URL, prefer_internal=True))


@pytest.fixture
def cdn_account(transport):
    """Account with a CDN management endpoint."""
    return Account(transport, CatalogEndpointResolver(PUBLIC_URL), cdn_url=CDN_URL)


@pytest.fixture
def container(account):
    """Container 'photos' in the public account."""
    return account.container("photos")
