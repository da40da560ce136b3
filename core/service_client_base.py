"""
Shared binding for booker API services

Every service holds one BookerApiClient: the API base URL plus the shared
httpx.AsyncClient transport. The transport belongs to whoever created it
(the pytest session fixture); services never close it.

Usage:
    class HealthService:
        def __init__(self, api: BookerApiClient):
            self.api = api

        async def ping(self) -> httpx.Response:
            response = await self.api.get("/ping")
            ensure_success(response, ErrorMessages.HEALTH.FAILED, HealthError)
            return response
"""

import logging
from typing import Any, Dict, Optional, Type

import httpx

from .exceptions import BookerServiceError

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def token_cookie(token: str) -> Dict[str, str]:
    """Auth header the booker API expects on mutating calls"""
    return {"Cookie": f"token={token}"}


def ensure_success(
    response: httpx.Response,
    message: str,
    error_cls: Type[BookerServiceError] = BookerServiceError,
) -> None:
    """
    Raise error_cls if the response is not 2xx.

    Must run before the body is parsed: an error page parsed as JSON would
    raise an unrelated decode error and hide the real status.
    """
    if not response.is_success:
        raise error_cls.from_response(message, response)


class BookerApiClient:
    """Base URL + shared transport for all booker API services"""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        """
        Args:
            base_url: API root, e.g. https://restful-booker.herokuapp.com
            http_client: Shared transport; connection pooling is reused across services
        """
        self.base_url = base_url.rstrip("/")
        self.client = http_client

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        url = self.url(path)
        response = await self.client.request(method, url, json=json, headers=headers)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """GET request"""
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """POST request"""
        return await self.request("POST", path, json=json, headers=headers)

    async def put(
        self,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """PUT request"""
        return await self.request("PUT", path, json=json, headers=headers)

    async def patch(
        self,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """PATCH request"""
        return await self.request("PATCH", path, json=json, headers=headers)

    async def delete(self, path: str, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """DELETE request"""
        return await self.request("DELETE", path, headers=headers)


__all__ = ["BookerApiClient", "JSON_HEADERS", "ensure_success", "token_cookie"]
