"""Internal constants for dint.

These constants define the integer encoding and the month lengths used
by the calendar rules. This module is not part of the public API.
"""

from __future__ import annotations

# Dint encoding: YYYY * 10000 + MM * 100 + DD
YEAR_FACTOR: int = 10_000
MONTH_FACTOR: int = 100

MONTHS_PER_YEAR: int = 12

# Length of the months that are not February, before the parity adjustment
LONG_MONTH_DAYS: int = 31
FEBRUARY_DAYS: int = 28
FEBRUARY_LEAP_DAYS: int = 29


__all__ = [
    "YEAR_FACTOR",
    "MONTH_FACTOR",
    "MONTHS_PER_YEAR",
    "LONG_MONTH_DAYS",
    "FEBRUARY_DAYS",
    "FEBRUARY_LEAP_DAYS",
]
