"""
Service Factory

Single construction point binding the base URL and the shared transport to
every service. No caching: each accessor returns a new instance.

Usage:
    factory = ServiceFactory("https://restful-booker.herokuapp.com", http_client)
    booking_service = factory.create_booking_service()
"""

import httpx

from services.auth_service import AuthService
from services.booking_service import BookingService
from services.create_booking_service import CreateBookingService
from services.delete_booking_service import DeleteBookingService
from services.get_booking_ids_service import GetBookingIdsService
from services.get_booking_service import GetBookingService
from services.health_service import HealthService
from services.partial_update_booking_service import PartialUpdateBookingService
from services.update_booking_service import UpdateBookingService

from .service_client_base import BookerApiClient


class ServiceFactory:
    """Builds booker API services sharing one base URL and transport"""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self.api = BookerApiClient(base_url, http_client)

    @property
    def base_url(self) -> str:
        return self.api.base_url

    def create_auth_service(self) -> AuthService:
        return AuthService(self.api)

    def create_health_service(self) -> HealthService:
        return HealthService(self.api)

    def create_get_booking_ids_service(self) -> GetBookingIdsService:
        return GetBookingIdsService(self.api)

    def create_get_booking_service(self) -> GetBookingService:
        return GetBookingService(self.api)

    def create_create_booking_service(self) -> CreateBookingService:
        return CreateBookingService(self.api)

    def create_update_booking_service(self) -> UpdateBookingService:
        return UpdateBookingService(self.api)

    def create_partial_update_booking_service(self) -> PartialUpdateBookingService:
        return PartialUpdateBookingService(self.api)

    def create_delete_booking_service(self) -> DeleteBookingService:
        return DeleteBookingService(self.api)

    def create_booking_service(self) -> BookingService:
        """Aggregate service; keep the instance across create and cleanup"""
        return BookingService(self.api)


__all__ = ["ServiceFactory"]
