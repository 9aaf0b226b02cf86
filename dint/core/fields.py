"""Field codec for dints.

A dint packs a calendar date into one integer as ``YYYY * 10000 + MM * 100
+ DD``, e.g. 20230912 for September 12, 2023. Packing does no range
checking: month 0, day 0 or day 377 are all valid intermediate values and
are resolved later by the arithmetic in ``dint.arithmetic``.

Unpacking uses floor division, so ``create`` and the field accessors are
exact inverses for any year, including zero and negative years, as long
as the month is 1-12 and the day is 1-31.

Examples:
    >>> create(2023, 9, 12)
    20230912
    >>> year(20230912), month(20230912), day(20230912)
    (2023, 9, 12)
"""

from __future__ import annotations

from dint._internal.calendar import days_in_month
from dint._internal.constants import MONTH_FACTOR, YEAR_FACTOR

Dint = int


def create(year: int, month: int, day: int) -> Dint:
    """Pack year, month and day into a dint.

    Args:
        year: The year.
        month: The month, not necessarily within 1-12.
        day: The day, not necessarily valid for the month.

    Returns:
        ``year * 10000 + month * 100 + day``.

    Examples:
        >>> create(2024, 2, 29)
        20240229
        >>> create(2014, 9, 0)  # accepted as is
        20140900
    """
    return year * YEAR_FACTOR + month * MONTH_FACTOR + day


def year(d: Dint) -> int:
    """Return the year of a dint."""
    return d // YEAR_FACTOR


def month(d: Dint) -> int:
    """Return the month of a dint."""
    return d // MONTH_FACTOR % MONTH_FACTOR


def day(d: Dint) -> int:
    """Return the day of the month of a dint."""
    return d % MONTH_FACTOR


def unpack(d: Dint) -> tuple[int, int, int]:
    """Return the (year, month, day) triple of a dint.

    Examples:
        >>> unpack(20230912)
        (2023, 9, 12)
    """
    return year(d), month(d), day(d)


def first_day_of_month(d: Dint) -> Dint:
    """Return the first day of the month of a given dint.

    Examples:
        >>> first_day_of_month(20230912)
        20230901
    """
    return create(year(d), month(d), 1)


def last_day_of_month(d: Dint) -> Dint:
    """Return the last day of the month of a given dint.

    Examples:
        >>> last_day_of_month(20230212)
        20230228
        >>> last_day_of_month(20240212)
        20240229
    """
    y, m = year(d), month(d)
    return create(y, m, days_in_month(y, m))


__all__ = [
    "Dint",
    "create",
    "year",
    "month",
    "day",
    "unpack",
    "first_day_of_month",
    "last_day_of_month",
]
