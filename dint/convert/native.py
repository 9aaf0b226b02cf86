"""Conversions between dints and the standard library date types.

Functions:
    to_date: Convert a dint to a UTC-midnight ``datetime.datetime``.
    to_native_date: Convert a dint to a ``datetime.date``.
    create_from_time: Create a dint from a ``date`` or ``datetime``.
    today: Return the current date as a dint.

Examples:
    >>> import datetime
    >>> to_date(20230912)
    datetime.datetime(2023, 9, 12, 0, 0, tzinfo=datetime.timezone.utc)
    >>> create_from_time(datetime.date(2023, 9, 12))
    20230912
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Optional

from dint.arithmetic.months import compose
from dint.core.fields import Dint, create, unpack
from dint.errors import ConversionError

logger = logging.getLogger(__name__)

# datetime.datetime is a subclass of datetime.date
Clock = Callable[[], datetime.date]


def to_native_date(d: Dint) -> datetime.date:
    """Convert a dint to a ``datetime.date``.

    Out-of-range months and days are carried the way ``compose`` carries
    them, so month 13 is January of the next year and day 0 is the last
    day of the previous month.

    Args:
        d: The dint to convert.

    Returns:
        The calendar date encoded by the dint, after normalization.

    Raises:
        ConversionError: If the normalized year is outside
            ``datetime.MINYEAR``..``datetime.MAXYEAR``.

    Examples:
        >>> to_native_date(20240229)
        datetime.date(2024, 2, 29)
        >>> to_native_date(20231312)
        datetime.date(2024, 1, 12)
        >>> to_native_date(20230900)
        datetime.date(2023, 8, 31)
    """
    y, m, dd = unpack(compose(*unpack(d)))
    try:
        return datetime.date(y, m, dd)
    except ValueError as e:
        logger.debug("cannot convert dint %d: %s", d, e)
        raise ConversionError(f"dint {d} is not a representable date: {e}") from e


def to_date(d: Dint) -> datetime.datetime:
    """Convert a dint to a ``datetime.datetime`` at midnight UTC.

    This is the inverse of ``create_from_time``.

    Raises:
        ConversionError: If the normalized year is out of range for datetime.

    Examples:
        >>> to_date(20230912).isoformat()
        '2023-09-12T00:00:00+00:00'
    """
    native = to_native_date(d)
    return datetime.datetime(
        native.year, native.month, native.day, tzinfo=datetime.timezone.utc
    )


def create_from_time(t: datetime.date) -> Dint:
    """Create a dint from a ``date`` or ``datetime``.

    The calendar fields are taken as they are, in whatever timezone an
    aware datetime carries; no conversion to UTC happens.

    Raises:
        ConversionError: If ``t`` has no year, month and day.

    Examples:
        >>> import datetime
        >>> create_from_time(datetime.datetime(2023, 9, 12, 23, 59))
        20230912
    """
    try:
        return create(t.year, t.month, t.day)
    except AttributeError as e:
        raise ConversionError(
            f"expected a date or datetime, got {type(t).__name__}"
        ) from e


def today(clock: Optional[Clock] = None) -> Dint:
    """Return the current date as a dint.

    Args:
        clock: Callable returning the current ``date`` or ``datetime``.
            Defaults to ``datetime.datetime.now`` (local wall clock).

    Examples:
        >>> import datetime
        >>> today(lambda: datetime.date(2023, 9, 12))
        20230912
    """
    now = (clock or datetime.datetime.now)()
    logger.debug("clock read: %s", now)
    return create_from_time(now)


__all__ = [
    "Clock",
    "to_native_date",
    "to_date",
    "create_from_time",
    "today",
]
