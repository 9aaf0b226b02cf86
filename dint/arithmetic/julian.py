"""Julian Day conversions and day arithmetic for dints.

Day-level arithmetic goes through the Julian Day Number, a continuous
day count, so that adding or subtracting days carries correctly across
month, year and leap-year boundaries.

Both directions use the Fliegel & Van Flandern integer algorithm, with its
constants written inline as published. Python floor division keeps the
400-year cycle index correct for days before the epoch as well, so no
special casing is needed for early dates.

Examples:
    >>> to_julian_day(20000101)
    2451545
    >>> from_julian_day(2451545)
    20000101
    >>> diff(20150912, 20140912)
    365
    >>> add_days(20240228, 2)
    20240301
"""

from __future__ import annotations

from dint.core.fields import Dint, create, unpack


def to_julian_day(d: Dint) -> int:
    """Convert a dint to its Julian Day Number.

    A day of 0 is accepted and means the day before the first of the
    month, which is what ``compose`` relies on.

    Args:
        d: The dint to convert.

    Returns:
        The Julian Day Number.

    Examples:
        >>> to_julian_day(20140912)
        2456913
    """
    y, m, dd = unpack(d)

    # March-based year: January and February belong to the previous year
    a = (14 - m) // 12
    y = y + 4800 - a
    m = m + 12 * a - 3

    return (
        dd
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def from_julian_day(julian_day: int) -> Dint:
    """Convert a Julian Day Number to a dint.

    Args:
        julian_day: The Julian Day Number.

    Returns:
        The dint of that day.

    Examples:
        >>> from_julian_day(2456913)
        20140912
    """
    p = julian_day + 68569
    q = 4 * p // 146097
    r = p - (146097 * q + 3) // 4
    s = 4000 * (r + 1) // 1461001
    t = r - 1461 * s // 4 + 31
    u = 80 * t // 2447
    v = u // 11

    return create(
        100 * (q - 49) + s + v,
        u + 2 - 12 * v,
        t - 2447 * u // 80,
    )


def diff(d1: Dint, d2: Dint) -> int:
    """Return the number of days from d2 to d1.

    Positive when d1 is after d2, negative when before.

    Examples:
        >>> diff(20150912, 20140912)
        365
        >>> diff(20140912, 20150912)
        -365
    """
    return to_julian_day(d1) - to_julian_day(d2)


def add_days(d: Dint, days: int) -> Dint:
    """Add a number of days to a dint. A negative number is allowed.

    Examples:
        >>> add_days(20231231, 1)
        20240101
        >>> add_days(20240301, -1)
        20240229
    """
    return from_julian_day(to_julian_day(d) + days)


__all__ = [
    "to_julian_day",
    "from_julian_day",
    "diff",
    "add_days",
]
