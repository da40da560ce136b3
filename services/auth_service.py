"""
Auth Service

Exchanges credentials for the booker API token (POST /auth).
"""

import logging

import httpx
from pydantic import ValidationError

from core.error_messages import ErrorMessages
from core.exceptions import AuthError, MissingTokenError
from core.service_client_base import BookerApiClient, ensure_success

from .models import AuthRequest, AuthResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Credential exchange against POST /auth"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def authenticate(self, username: str, password: str) -> str:
        """
        Obtain an auth token.

        Raises:
            AuthError: non-success status
            MissingTokenError: success status but no token in the body
        """
        response = await self.authenticate_response(username, password)
        ensure_success(response, ErrorMessages.AUTH.FAILED, AuthError)

        try:
            token = AuthResponse.model_validate(response.json()).token
        except ValidationError as e:
            raise MissingTokenError(status_code=response.status_code) from e

        logger.debug(f"Authenticated as {username}")
        return token

    async def authenticate_response(self, username: str, password: str) -> httpx.Response:
        """POST /auth and return the raw response"""
        return await self.api.post(
            "/auth",
            json=AuthRequest(username=username, password=password).model_dump(),
        )
