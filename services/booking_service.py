"""
Booking Service

All booking operations behind one object, composed from the
single-responsibility services, plus best-effort cleanup of every booking
created through it.

Keep one instance across create and cleanup: the created-id list lives on
the instance.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from core.exceptions import BookingError
from core.service_client_base import BookerApiClient

from .create_booking_service import CreateBookingService
from .delete_booking_service import DeleteBookingService
from .get_booking_ids_service import FilterParams, GetBookingIdsService
from .get_booking_service import GetBookingService
from .partial_update_booking_service import PartialUpdateBookingService
from .update_booking_service import UpdateBookingService

logger = logging.getLogger(__name__)


class BookingService:
    """Booking CRUD with created-booking tracking"""

    def __init__(self, api: BookerApiClient):
        self.api = api
        self._get_ids = GetBookingIdsService(api)
        self._get = GetBookingService(api)
        self._create = CreateBookingService(api)
        self._update = UpdateBookingService(api)
        self._partial_update = PartialUpdateBookingService(api)
        self._delete = DeleteBookingService(api)

    @property
    def created_booking_ids(self) -> List[int]:
        return self._create.created_booking_ids

    # =========================================================================
    # Read
    # =========================================================================

    async def get_booking_ids(self, params: Optional[FilterParams] = None) -> List[Dict[str, Any]]:
        return await self._get_ids.get_booking_ids(params)

    async def get_booking_ids_response(self, params: Optional[FilterParams] = None) -> httpx.Response:
        return await self._get_ids.get_booking_ids_response(params)

    async def get_booking(self, booking_id: int) -> Dict[str, Any]:
        return await self._get.get_booking(booking_id)

    async def get_booking_response(self, booking_id: int) -> httpx.Response:
        return await self._get.get_booking_response(booking_id)

    # =========================================================================
    # Write
    # =========================================================================

    async def create_booking(self, booking: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._create.create_booking(booking)

    async def create_booking_response(self, booking: Mapping[str, Any]) -> httpx.Response:
        return await self._create.create_booking_response(booking)

    async def update_booking(self, booking_id: int, booking: Mapping[str, Any], token: str) -> Dict[str, Any]:
        return await self._update.update_booking(booking_id, booking, token)

    async def update_booking_response(
        self, booking_id: int, booking: Mapping[str, Any], token: str
    ) -> httpx.Response:
        return await self._update.update_booking_response(booking_id, booking, token)

    async def partial_update_booking(
        self, booking_id: int, partial_booking: Mapping[str, Any], token: str
    ) -> Dict[str, Any]:
        return await self._partial_update.partial_update_booking(booking_id, partial_booking, token)

    async def partial_update_booking_response(
        self, booking_id: int, partial_booking: Mapping[str, Any], token: str
    ) -> httpx.Response:
        return await self._partial_update.partial_update_booking_response(booking_id, partial_booking, token)

    async def delete_booking(self, booking_id: int, token: str) -> str:
        return await self._delete.delete_booking(booking_id, token)

    async def delete_booking_response(self, booking_id: int, token: str) -> httpx.Response:
        return await self._delete.delete_booking_response(booking_id, token)

    # =========================================================================
    # Teardown
    # =========================================================================

    async def cleanup(self, token: str) -> None:
        """
        Delete every booking created through this instance.

        Best effort: a booking a test already deleted fails with BookingError,
        and a dropped connection with httpx.HTTPError. Either is logged and
        skipped so the remaining ids are still deleted. The tracked list is
        cleared afterwards whatever the individual outcomes.
        """
        booking_ids = self._create.created_booking_ids
        try:
            for booking_id in booking_ids:
                try:
                    await self._delete.delete_booking(booking_id, token)
                except (BookingError, httpx.HTTPError) as e:
                    logger.warning(f"Cleanup could not delete booking {booking_id}: {e}")
        finally:
            self._create.clear_created_booking_ids()

        logger.debug(f"Cleanup processed {len(booking_ids)} booking(s)")
