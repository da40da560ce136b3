"""
Create Booking Service

Creates bookings (POST /booking) and remembers every id it mints so the
caller can clean them up later.
"""

import logging
from typing import Any, Dict, List, Mapping

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, JSON_HEADERS, ensure_success

logger = logging.getLogger(__name__)


class CreateBookingService:
    """Booking creation against POST /booking"""

    def __init__(self, api: BookerApiClient):
        self.api = api
        self._created_booking_ids: List[int] = []

    @property
    def created_booking_ids(self) -> List[int]:
        """Ids minted through this instance, in creation order"""
        return list(self._created_booking_ids)

    def clear_created_booking_ids(self) -> None:
        self._created_booking_ids.clear()

    async def create_booking(self, booking: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a booking and track its id.

        Returns:
            Parsed ``{"bookingid": int, "booking": {...}}``

        Raises:
            BookingError: non-success status
        """
        response = await self.create_booking_response(booking)
        ensure_success(response, ErrorMessages.BOOKING.CREATE_FAILED, BookingError)

        result = response.json()
        self._created_booking_ids.append(result["bookingid"])
        logger.debug(f"Created booking {result['bookingid']}")
        return result

    async def create_booking_response(self, booking: Mapping[str, Any]) -> httpx.Response:
        """POST /booking and return the raw response; nothing is tracked"""
        return await self.api.post("/booking", json=dict(booking), headers=JSON_HEADERS)
