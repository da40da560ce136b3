"""Booker API services"""

from .auth_service import AuthService
from .booking_service import BookingService
from .create_booking_service import CreateBookingService
from .delete_booking_service import DeleteBookingService
from .get_booking_ids_service import GetBookingIdsService, build_query_string
from .get_booking_service import GetBookingService
from .health_service import HealthService
from .partial_update_booking_service import PartialUpdateBookingService
from .update_booking_service import UpdateBookingService

__all__ = [
    "AuthService",
    "BookingService",
    "CreateBookingService",
    "DeleteBookingService",
    "GetBookingIdsService",
    "GetBookingService",
    "HealthService",
    "PartialUpdateBookingService",
    "UpdateBookingService",
    "build_query_string",
]
