"""Internal utilities for dint.

This module contains private implementation details:
    - Constants and magic numbers
    - Gregorian calendar rules

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dint._internal.calendar import days_in_month, is_leap_year

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
]
