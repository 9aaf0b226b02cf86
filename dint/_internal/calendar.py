"""Calendar utilities for dint.

This module provides the leap year rule and month lengths of the
proleptic Gregorian calendar. Both are defined for any integer year.

This module is not part of the public API; the functions are re-exported
from the top-level ``dint`` package.
"""

from __future__ import annotations

from dint._internal.constants import (
    FEBRUARY_DAYS,
    FEBRUARY_LEAP_DAYS,
    LONG_MONTH_DAYS,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Months other than February alternate 31/30 from January to July and
    again from August to December, so ``(month - 1) % 7 % 2`` is 1 exactly
    for the 30-day months.

    The month is expected to be already normalized to 1-12. Nothing is
    raised for other values; the formula result is returned as is.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 9)
        30
        >>> days_in_month(2023, 8)
        31
    """
    if month == 2:
        return FEBRUARY_LEAP_DAYS if is_leap_year(year) else FEBRUARY_DAYS
    return LONG_MONTH_DAYS - ((month - 1) % 7 % 2)


__all__ = [
    "is_leap_year",
    "days_in_month",
]
