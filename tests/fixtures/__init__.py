"""
Shared Test Fixtures

Seedable generators used by the booking data contract and the tests.

Structure:
    - generators.py: SimpleFaker (per-instance random source) and date helpers
"""

from .generators import (
    FIRST_NAMES,
    LAST_NAMES,
    SimpleFaker,
    iso_date,
)

__all__ = [
    "FIRST_NAMES",
    "LAST_NAMES",
    "SimpleFaker",
    "iso_date",
]
