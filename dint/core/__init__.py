"""Core dint type and field codec."""

from __future__ import annotations

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

__all__: list[str] = [
    "Dint",
    "create",
    "year",
    "month",
    "day",
    "unpack",
    "first_day_of_month",
    "last_day_of_month",
]
