"""Date arithmetic on dints.

This module provides the two arithmetic layers:
    - Day-level arithmetic through Julian Day Numbers (diff, add_days)
    - Month/year arithmetic with limit and extend day policies

Examples:
    >>> from dint.arithmetic import add_days, add_months, diff
    >>> add_days(20231231, 1)
    20240101
    >>> add_months(20240131, 1)
    20240229
    >>> diff(20240301, 20240228)
    2
"""

from __future__ import annotations

from dint.arithmetic.julian import (
    add_days,
    diff,
    from_julian_day,
    to_julian_day,
)
from dint.arithmetic.months import (
    add_months,
    add_months_extend,
    add_years,
    add_years_extend,
    compose,
    compose_extend,
    compose_limit,
)

__all__ = [
    # Julian Day
    "to_julian_day",
    "from_julian_day",
    "diff",
    "add_days",
    # Months and years
    "compose_limit",
    "compose_extend",
    "add_months",
    "add_months_extend",
    "add_years",
    "add_years_extend",
    "compose",
]
