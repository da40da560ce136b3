"""
Update Booking Service

Full replacement of a booking (PUT /booking/{id}). The booker API rejects a
body missing any required field with 400.
"""

from typing import Any, Dict, Mapping

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, JSON_HEADERS, ensure_success, token_cookie


class UpdateBookingService:
    """Full booking update against PUT /booking/{id}"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def update_booking(self, booking_id: int, booking: Mapping[str, Any], token: str) -> Dict[str, Any]:
        """
        Replace a booking and return the stored result.

        Raises:
            BookingError: non-success status
        """
        response = await self.update_booking_response(booking_id, booking, token)
        ensure_success(response, ErrorMessages.BOOKING.UPDATE_FAILED, BookingError)
        return response.json()

    async def update_booking_response(
        self, booking_id: int, booking: Mapping[str, Any], token: str
    ) -> httpx.Response:
        return await self.api.put(
            f"/booking/{booking_id}",
            json=dict(booking),
            headers={**JSON_HEADERS, **token_cookie(token)},
        )
