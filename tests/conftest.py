"""Shared fixtures for dint tests.

The project root is put on sys.path so the suite runs from a plain
checkout as well as from an installed package.
"""

from __future__ import annotations

import datetime
import sys
from pathlib import Path
from typing import Callable

import pytest

_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


@pytest.fixture
def fixed_clock() -> Callable[[], datetime.datetime]:
    """A clock stuck at 2023-09-12 08:30 local time."""
    return lambda: datetime.datetime(2023, 9, 12, 8, 30)


@pytest.fixture(scope="session")
def leap_cycle_dints() -> list[int]:
    """Every valid dint from 2021-01-01 to 2024-12-31, in order."""
    start = datetime.date(2021, 1, 1)
    end = datetime.date(2024, 12, 31)
    return [
        int((start + datetime.timedelta(days=n)).strftime("%Y%m%d"))
        for n in range((end - start).days + 1)
    ]
