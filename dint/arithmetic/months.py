"""Month and year arithmetic for dints.

Shifting a date by months or years can land on a day that the target
month does not have (e.g. Jan 31 + 1 month). Two policies resolve this:

Limit:
    The day is clamped to the last valid day of the target month.
    ``add_months(20230131, 1) -> 20230228``
    ``add_months(20230228, 1) -> 20230328``

Extend:
    A date on the last day of its month stays on the last day of the
    target month; any other date behaves as with limit.
    ``add_months_extend(20230228, 1) -> 20230331``
    ``add_months_extend(20140930, 1) -> 20141031``

Month totals are normalized with floor division, so negative offsets
always land on a month in 1-12 of the correct year.
"""

from __future__ import annotations

from dint._internal.calendar import days_in_month
from dint._internal.constants import MONTHS_PER_YEAR, YEAR_FACTOR
from dint.arithmetic.julian import add_days
from dint.core.fields import Dint, create, day, month, year


def compose_limit(d: Dint, year_: int, month_: int) -> Dint:
    """Rebuild a dint at the given year and month, clamping the day.

    The day of ``d`` is kept unless the target month is shorter, in
    which case the last day of the target month is used.

    Args:
        d: The dint whose day is kept.
        year_: The target year.
        month_: The target month (1-12).

    Returns:
        The composed dint.

    Examples:
        >>> compose_limit(20230131, 2023, 4)
        20230430
    """
    return create(year_, month_, min(day(d), days_in_month(year_, month_)))


def compose_extend(d: Dint, year_: int, month_: int) -> Dint:
    """Rebuild a dint at the given year and month, keeping month end.

    If ``d`` is the last day of its own month, the result is the last
    day of the target month. Otherwise this is ``compose_limit``.

    Examples:
        >>> compose_extend(20230228, 2024, 2)
        20240229
        >>> compose_extend(20230227, 2024, 2)
        20240227
    """
    if day(d) == days_in_month(year(d), month(d)):
        return create(year_, month_, days_in_month(year_, month_))
    return compose_limit(d, year_, month_)


def _shift_months(d: Dint, months: int) -> tuple[int, int]:
    total_months = year(d) * MONTHS_PER_YEAR + month(d) - 1 + months
    return total_months // MONTHS_PER_YEAR, total_months % MONTHS_PER_YEAR + 1


def add_months(d: Dint, months: int) -> Dint:
    """Add months to a dint. A negative number is allowed.

    The resulting day is limited by the number of days in the resulting
    month.

    Examples:
        >>> add_months(20140930, 1)
        20141030
        >>> add_months(20240131, 1)
        20240229
        >>> add_months(20240115, -13)
        20221215
    """
    return compose_limit(d, *_shift_months(d, months))


def add_months_extend(d: Dint, months: int) -> Dint:
    """Add months to a dint. A negative number is allowed.

    If the dint is the last day of its month, the result is the last day
    of the resulting month as well.

    Examples:
        >>> add_months_extend(20140930, 1)
        20141031
    """
    return compose_extend(d, *_shift_months(d, months))


def add_years(d: Dint, years: int) -> Dint:
    """Add years to a dint. A negative number is allowed.

    Examples:
        >>> add_years(20240229, 1)
        20250228
    """
    return compose_limit(d, year(d) + years, month(d))


def add_years_extend(d: Dint, years: int) -> Dint:
    """Add years to a dint, keeping a month-end date at month end.

    Examples:
        >>> add_years_extend(20230228, 1)
        20240229
    """
    return compose_extend(d, year(d) + years, month(d))


def compose(year_: int, month_: int, day_: int) -> Dint:
    """Compose a dint from any number of years, months and days.

    Months beyond 12 carry into the year and days beyond the end of the
    month carry through Julian Day arithmetic, so nothing is clamped.
    The month and day count from the start of the year and month:
    ``compose(y, 1, 1)`` is January 1 of year ``y``.

    Args:
        year_: The year.
        month_: Month count, may exceed 12 or be zero or negative.
        day_: Day count, may exceed the length of the month.

    Returns:
        The normalized dint.

    Examples:
        >>> compose(2014, 13, 12)
        20150112
        >>> compose(2013, 9, 12 + 365)
        20140912
    """
    return add_days(add_months(year_ * YEAR_FACTOR, month_), day_)


__all__ = [
    "compose_limit",
    "compose_extend",
    "add_months",
    "add_months_extend",
    "add_years",
    "add_years_extend",
    "compose",
]
