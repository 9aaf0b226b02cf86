"""Conversion utilities.

This module provides functions for converting dints to and from the
standard library ``datetime`` types, and for reading the current date.

Examples:
    >>> import datetime
    >>> from dint.convert import create_from_time, to_date
    >>> d = create_from_time(datetime.date(2024, 1, 15))
    >>> d
    20240115
    >>> to_date(d).tzinfo
    datetime.timezone.utc
"""

from __future__ import annotations

from dint.convert.native import (
    Clock,
    create_from_time,
    to_date,
    to_native_date,
    today,
)

__all__ = [
    "Clock",
    "to_date",
    "to_native_date",
    "create_from_time",
    "today",
]
