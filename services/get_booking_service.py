"""
Get Booking Service

Reads back a single booking (GET /booking/{id}).
"""

from typing import Any, Dict

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, JSON_HEADERS, ensure_success


class GetBookingService:
    """Single booking read against GET /booking/{id}"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def get_booking(self, booking_id: int) -> Dict[str, Any]:
        """
        Return the parsed booking.

        Raises:
            BookingError: non-success status (404 once deleted)
        """
        response = await self.get_booking_response(booking_id)
        ensure_success(response, ErrorMessages.BOOKING.GET_FAILED, BookingError)
        return response.json()

    async def get_booking_response(self, booking_id: int) -> httpx.Response:
        return await self.api.get(f"/booking/{booking_id}", headers={"Accept": JSON_HEADERS["Accept"]})
