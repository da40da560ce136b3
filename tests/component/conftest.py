"""
Component Test Layer Configuration

Services exercised against MockHttpClient in place of httpx.AsyncClient:
no network, no stub server.

Usage:
    pytest tests/component -v
    pytest tests/component -v -k "cleanup"
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.service_client_base import BookerApiClient
from core.service_factory import ServiceFactory
from tests.component.mocks import MockHttpClient

BASE_URL = "http://booker.test"


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# HTTP Mocks
# =============================================================================

@pytest.fixture
def mock_http() -> MockHttpClient:
    """Mock HTTP client"""
    return MockHttpClient()


@pytest.fixture
def api(mock_http: MockHttpClient) -> BookerApiClient:
    """API binding over the mock transport"""
    return BookerApiClient(BASE_URL, mock_http)


@pytest.fixture
def service_factory(mock_http: MockHttpClient) -> ServiceFactory:
    """Service factory over the mock transport"""
    return ServiceFactory(BASE_URL, mock_http)
