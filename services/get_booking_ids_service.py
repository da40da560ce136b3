"""
Get Booking IDs Service

Lists booking ids, optionally filtered by name and dates (GET /booking).
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

import httpx

from core.error_messages import ErrorMessages
from core.exceptions import BookingError
from core.service_client_base import BookerApiClient, ensure_success

from .models import GetBookingIdsParams

FilterParams = Union[GetBookingIdsParams, Mapping[str, Any]]


def build_query_string(params: Optional[FilterParams] = None) -> str:
    """
    Serialize filters to ``?key=value&...``.

    Only defined (non-None) fields are sent, in the order they appear in
    params. Returns "" when nothing is defined.
    """
    if params is None:
        return ""

    if isinstance(params, GetBookingIdsParams):
        defined = params.model_dump(exclude_none=True)
    else:
        defined = {key: value for key, value in params.items() if value is not None}

    query = urlencode(defined)
    return f"?{query}" if query else ""


class GetBookingIdsService:
    """Booking id listing against GET /booking"""

    def __init__(self, api: BookerApiClient):
        self.api = api

    async def get_booking_ids(self, params: Optional[FilterParams] = None) -> List[Dict[str, Any]]:
        """
        Return the parsed list of ``{"bookingid": int}`` entries.

        Raises:
            BookingError: non-success status
        """
        response = await self.get_booking_ids_response(params)
        ensure_success(response, ErrorMessages.BOOKING.GET_IDS_FAILED, BookingError)
        return response.json()

    async def get_booking_ids_response(self, params: Optional[FilterParams] = None) -> httpx.Response:
        """GET /booking and return the raw response (error pages are not JSON)"""
        return await self.api.get(f"/booking{build_query_string(params)}")
