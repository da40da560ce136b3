#!/usr/bin/env python3
"""Booker API test configuration

Target API location, test credentials and transport settings for the
booking API test suite.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from .logging_config import LoggingConfig


DEFAULT_BASE_URL = "https://restful-booker.herokuapp.com"


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


def _optional_int(val: str) -> Optional[int]:
    try:
        return int(val) if val else None
    except ValueError:
        return None


@dataclass
class BookerConfig:
    """Booker API test settings"""

    # ===========================================
    # Target API
    # ===========================================
    base_url: str = DEFAULT_BASE_URL

    # ===========================================
    # Credentials (POST /auth)
    # ===========================================
    username: str = "admin"
    password: str = "password123"

    # ===========================================
    # Transport
    # ===========================================
    http_timeout: float = 30.0

    # Where the session token is dumped for inspection; never read back
    token_file: str = ".auth/token.json"

    # "mock": in-process stub of the booker API, "live": real network calls
    test_mode: str = "mock"

    # Seed for BookingTestDataFactory; None draws from system entropy
    test_data_seed: Optional[int] = None

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def is_live(self) -> bool:
        return self.test_mode == "live"

    @classmethod
    def from_env(cls) -> 'BookerConfig':
        """Load booker configuration from environment variables"""
        test_mode = os.getenv("API_TEST_MODE", "mock").lower()
        if test_mode not in ("mock", "live"):
            raise ValueError(f"API_TEST_MODE must be 'mock' or 'live', got '{test_mode}'")

        return cls(
            base_url=os.getenv("BOOKER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            username=os.getenv("TEST_USER_USERNAME", "admin"),
            password=os.getenv("TEST_USER_PASSWORD", "password123"),
            http_timeout=_float(os.getenv("BOOKER_HTTP_TIMEOUT", ""), 30.0),
            token_file=os.getenv("BOOKER_TOKEN_FILE", ".auth/token.json"),
            test_mode=test_mode,
            test_data_seed=_optional_int(os.getenv("TEST_DATA_SEED", "")),
            logging=LoggingConfig.from_env(),
        )
