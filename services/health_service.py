"""
Health Service

Liveness check of the booker API (GET /ping).
"""

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import HealthError
from core.service_client_base import BookerApiClient, ensure_success


class HealthService:
    """Liveness check against GET /ping"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def ping(self) -> httpx.Response:
        """Return the raw response; callers assert on the status code"""
        response = await self.api.get("/ping")
        ensure_success(response, ErrorMessages.HEALTH.FAILED, HealthError)
        return response
