"""
Delete Booking Service

Deletes a booking (DELETE /booking/{id}). The booker API answers with a
plain-text body, not JSON.
"""

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, ensure_success, token_cookie


class DeleteBookingService:
    """Booking deletion against DELETE /booking/{id}"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def delete_booking(self, booking_id: int, token: str) -> str:
        """
        Delete a booking and return the response text.

        Raises:
            BookingError: non-success status
        """
        response = await self.delete_booking_response(booking_id, token)
        ensure_success(response, ErrorMessages.BOOKING.DELETE_FAILED, BookingError)
        return response.text

    async def delete_booking_response(self, booking_id: int, token: str) -> httpx.Response:
        return await self.api.delete(
            f"/booking/{booking_id}",
            headers={"Content-Type": "application/json", **token_cookie(token)},
        )
