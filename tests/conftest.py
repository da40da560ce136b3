"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - api/        : Booker API contract tests (stub by default, live with API_TEST_MODE=live)
    - component/  : Services against a mocked transport
    - unit/       : Pure functions, models and the data factory, no I/O
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.config import BookerConfig, get_settings
from core.logger import setup_logging
from tests.contracts.booking import BookingTestDataFactory


# =============================================================================
# Test Configuration
# =============================================================================

@pytest.fixture(scope="session")
def booker_settings() -> BookerConfig:
    """Provide test configuration"""
    return get_settings()


# =============================================================================
# Test Data
# =============================================================================

@pytest.fixture(scope="session")
def test_data_factory(booker_settings: BookerConfig) -> BookingTestDataFactory:
    """
    Provide the booking test data factory.

    One instance per session: with TEST_DATA_SEED set the run is reproducible
    while each test still draws the next values of the seeded sequence.
    """
    return BookingTestDataFactory(seed=booker_settings.test_data_seed)


# =============================================================================
# Markers and Logging
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and logging"""
    config.addinivalue_line("markers", "api: Booker API contract tests")
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line(
        "markers", "observed: asserts current behaviour of the external API, not a documented contract"
    )

    setup_logging(get_settings().logging)


def pytest_collection_modifyitems(config, items):
    """Skip observed-behaviour tests on request"""
    skip_observed = pytest.mark.skip(reason="SKIP_OBSERVED_TESTS is set")

    for item in items:
        if "observed" in item.keywords and os.getenv("SKIP_OBSERVED_TESTS"):
            item.add_marker(skip_observed)
