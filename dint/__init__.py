"""dint: calendar dates as YYYYMMDD integers.

A dint is a plain ``int`` such as 20230912 (September 12, 2023). Dints
compare and sort like the integers they are, need no timezone handling,
and are manipulated with the pure functions in this package.

Field codec:
    create, year, month, day, unpack
    first_day_of_month, last_day_of_month

Calendar:
    is_leap_year, days_in_month

Arithmetic:
    add_days, diff: exact day arithmetic via Julian Day Numbers
    add_months, add_years: day clamped to the target month (limit)
    add_months_extend, add_years_extend: month end stays month end (extend)
    compose: build a dint from overflowing year/month/day counts
    to_julian_day, from_julian_day

Conversion:
    to_date, to_native_date, create_from_time, today

Exceptions:
    DintError: Base exception
    ConversionError: Dint year outside the datetime range

Example:
    >>> import dint
    >>> d = dint.create(2024, 1, 31)
    >>> dint.add_months(d, 1)
    20240229
    >>> dint.add_months_extend(20230228, 1)
    20230331
    >>> dint.diff(20150912, 20140912)
    365
"""

from __future__ import annotations

__version__ = "0.1.0"

# Field codec
from dint.core.fields import (
    Dint,
    create,
    day,
    first_day_of_month,
    last_day_of_month,
    month,
    unpack,
    year,
)

# Calendar
from dint._internal.calendar import days_in_month, is_leap_year

# Arithmetic
from dint.arithmetic import (
    add_days,
    add_months,
    add_months_extend,
    add_years,
    add_years_extend,
    compose,
    compose_extend,
    compose_limit,
    diff,
    from_julian_day,
    to_julian_day,
)

# Conversion
from dint.convert import create_from_time, to_date, to_native_date, today

# Exceptions
from dint.errors import ConversionError, DintError

__all__: list[str] = [
    "__version__",
    # Field codec
    "Dint",
    "create",
    "year",
    "month",
    "day",
    "unpack",
    "first_day_of_month",
    "last_day_of_month",
    # Calendar
    "is_leap_year",
    "days_in_month",
    # Arithmetic
    "to_julian_day",
    "from_julian_day",
    "diff",
    "add_days",
    "compose_limit",
    "compose_extend",
    "add_months",
    "add_months_extend",
    "add_years",
    "add_years_extend",
    "compose",
    # Conversion
    "to_date",
    "to_native_date",
    "create_from_time",
    "today",
    # Exceptions
    "DintError",
    "ConversionError",
]
