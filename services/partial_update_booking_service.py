"""
Partial Update Booking Service

Merges any subset of booking fields into a stored booking
(PATCH /booking/{id}).
"""

from typing import Any, Dict, Mapping

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, JSON_HEADERS, ensure_success, token_cookie


class PartialUpdateBookingService:
    """Partial booking update against PATCH /booking/{id}"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def partial_update_booking(
        self, booking_id: int, partial_booking: Mapping[str, Any], token: str
    ) -> Dict[str, Any]:
        """
        Patch a booking and return the full merged booking.

        Raises:
            BookingError: non-success status
        """
        response = await self.partial_update_booking_response(booking_id, partial_booking, token)
        ensure_success(response, ErrorMessages.BOOKING.PARTIAL_UPDATE_FAILED, BookingError)
        return response.json()

    async def partial_update_booking_response(
        self, booking_id: int, partial_booking: Mapping[str, Any], token: str
    ) -> httpx.Response:
        return await self.api.patch(
            f"/booking/{booking_id}",
            json=dict(partial_booking),
            headers={**JSON_HEADERS, **token_cookie(token)},
        )
