"""dint exception hierarchy.

All dint-specific exceptions inherit from DintError. Date arithmetic on
integers never raises; only conversions to and from ``datetime`` do.
"""

from __future__ import annotations


class DintError(Exception):
    """Base exception for all dint errors."""

    pass


class ConversionError(DintError):
    """A dint could not be converted to or from a ``datetime`` value.

    Raised at the boundary with the standard library date types, where
    out-of-range components are not accepted.

    Examples:
        - Month value outside 1-12 when calling to_date
        - Year outside datetime.MINYEAR..datetime.MAXYEAR
        - An object without year/month/day passed to create_from_time
    """

    pass


__all__ = [
    "DintError",
    "ConversionError",
]
