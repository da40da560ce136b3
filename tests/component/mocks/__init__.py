"""
Component Test Mocks

Stand-ins for the transport and the external booker API.
"""

from .booker_stub import create_booker_app
from .http_mock import MockHttpClient, make_response

__all__ = [
    'MockHttpClient',
    'create_booker_app',
    'make_response',
]
