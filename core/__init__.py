#!/usr/bin/env python3
"""
Core Module for the Booker API Test Suite

Shared infrastructure used by the services and the test layers.

COMPONENTS:
    - config/: Environment-driven configuration (target API, credentials, logging)
    - logger.py: Logger setup from LoggingConfig
    - error_messages.py: Canonical error message vocabulary
    - exceptions.py: AuthError / HealthError / BookingError taxonomy
    - service_client_base.py: Base URL + shared transport binding for services
    - service_factory.py: Single construction point for all services

USAGE:
    from core.service_factory import ServiceFactory

    factory = ServiceFactory(settings.base_url, http_client)
    booking_service = factory.create_booking_service()
"""
