"""
API Test Layer Configuration

Booker API contract tests.
- API_TEST_MODE=mock (default): requests go to an in-process stub through
  httpx.ASGITransport, no network needed
- API_TEST_MODE=live: requests go to BOOKER_BASE_URL

Transport and auth token are session-scoped: one per pytest(-xdist) worker,
the token fetched exactly once before the first test that needs it.

Usage:
    pytest tests/api -v                         # Against the stub
    API_TEST_MODE=live pytest tests/api -v      # Against the real API
    pytest tests/api -v -k "delete"             # Delete booking tests
"""

import json
import logging
from pathlib import Path
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from core.config import BookerConfig
from core.error_messages import ErrorMessages
from core.exceptions import AuthError
from core.service_factory import ServiceFactory
from services.booking_service import BookingService
from tests.component.mocks import create_booker_app

logger = logging.getLogger(__name__)


# =============================================================================
# Transport and Services
# =============================================================================


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def request_context(booker_settings: BookerConfig) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Shared async HTTP client (connection pool) for the whole worker"""
    transport = None
    if not booker_settings.is_live:
        app = create_booker_app(booker_settings.username, booker_settings.password)
        transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, timeout=booker_settings.http_timeout) as client:
        yield client


@pytest.fixture(scope="session")
def service_factory(booker_settings: BookerConfig, request_context: httpx.AsyncClient) -> ServiceFactory:
    """Service factory bound to the base URL and the shared transport"""
    return ServiceFactory(booker_settings.base_url, request_context)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def auth_token(booker_settings: BookerConfig, service_factory: ServiceFactory) -> str:
    """
    Worker-scoped auth token.

    Also written to BOOKER_TOKEN_FILE for inspection; nothing reads it back.
    """
    auth_service = service_factory.create_auth_service()
    try:
        token = await auth_service.authenticate(booker_settings.username, booker_settings.password)
    except AuthError as e:
        raise AuthError(
            f"{ErrorMessages.AUTH.SETUP_FAILED}: {e}",
            status_code=e.status_code,
            status_text=e.status_text,
        ) from e

    token_file = Path(booker_settings.token_file)
    token_file.parent.mkdir(parents=True, exist_ok=True)
    token_file.write_text(json.dumps({"token": token}, indent=2), encoding="utf-8")
    logger.info(f"Authentication token saved to {token_file}")

    return token


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def booking_service(
    service_factory: ServiceFactory, auth_token: str
) -> AsyncGenerator[BookingService, None]:
    """Module-wide booking service; bookings it created are deleted at module teardown"""
    service = service_factory.create_booking_service()
    yield service
    await service.cleanup(auth_token)


# =============================================================================
# Assertion Helpers
# =============================================================================


# Status the booker API answers for mutations on unknown or deleted ids
NOT_FOUND_STATUSES = (404, 405)


class APIAssertions:
    """API-specific assertion helpers"""

    @staticmethod
    def assert_status(response: httpx.Response, expected_status: int):
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_not_found(response: httpx.Response):
        assert response.status_code in NOT_FOUND_STATUSES, (
            f"Expected one of {NOT_FOUND_STATUSES}, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_forbidden(response: httpx.Response):
        assert response.status_code == 403, f"Expected 403, got {response.status_code}"

    @staticmethod
    def assert_booking_matches(actual: dict, expected: dict):
        """Every field of expected echoes back unchanged"""
        for field, value in expected.items():
            assert actual.get(field) == value, f"{field}: expected {value!r}, got {actual.get(field)!r}"


@pytest.fixture
def api_assert() -> APIAssertions:
    """Provide API assertion helpers"""
    return APIAssertions()
