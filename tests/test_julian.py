"""Tests for Julian Day conversion and day arithmetic."""

from __future__ import annotations

import datetime

import pytest

from dint import (
    add_days,
    create,
    days_in_month,
    diff,
    from_julian_day,
    to_julian_day,
)

# datetime ordinal 1 (0001-01-01) is Julian Day 1721426
_ORDINAL_TO_JDN = 1721425


class TestToJulianDay:
    """Tests for dint to Julian Day Number conversion."""

    @pytest.mark.parametrize(
        "d,jdn",
        [
            (20000101, 2451545),
            (19700101, 2440588),
            (20140912, 2456913),
            (18581117, 2400001),
            (15821015, 2299161),
        ],
    )
    def test_known_values(self, d: int, jdn: int) -> None:
        """Test reference Julian Day Numbers."""
        assert to_julian_day(d) == jdn

    def test_matches_stdlib_ordinal(self) -> None:
        """Test agreement with datetime.date.toordinal."""
        for d in (20240229, 19991231, 10101, 99991231, 16000301):
            native = datetime.date(d // 10000, d // 100 % 100, d % 100)
            assert to_julian_day(d) == native.toordinal() + _ORDINAL_TO_JDN

    def test_day_zero_is_previous_day(self) -> None:
        """Test that day 0 means the last day of the previous month."""
        assert to_julian_day(20150100) == to_julian_day(20141231)
        assert to_julian_day(20240300) == to_julian_day(20240229)


class TestFromJulianDay:
    """Tests for Julian Day Number to dint conversion."""

    @pytest.mark.parametrize(
        "jdn,d",
        [
            (2451545, 20000101),
            (2440588, 19700101),
            (2456913, 20140912),
            (2299161, 15821015),
        ],
    )
    def test_known_values(self, jdn: int, d: int) -> None:
        """Test reference Julian Day Numbers."""
        assert from_julian_day(jdn) == d

    def test_round_trip_every_day_of_four_years(self, leap_cycle_dints: list[int]) -> None:
        """Test from_julian_day(to_julian_day(d)) == d across a leap cycle."""
        for d in leap_cycle_dints:
            assert from_julian_day(to_julian_day(d)) == d

    def test_consecutive_days_of_leap_cycle(self, leap_cycle_dints: list[int]) -> None:
        """Test that consecutive dates have consecutive Julian Day Numbers."""
        first = to_julian_day(leap_cycle_dints[0])
        for offset, d in enumerate(leap_cycle_dints):
            assert to_julian_day(d) == first + offset

    @pytest.mark.parametrize("year", [1, 4, 100, 400, 1582, 1900, 2000, 4321, 9999])
    def test_matches_stdlib_across_calendar(self, year: int) -> None:
        """Test both directions against datetime ordinals across the year range."""
        for m in (1, 2, 3, 12):
            native = datetime.date(year, m, days_in_month(year, m))
            jdn = native.toordinal() + _ORDINAL_TO_JDN
            d = create(native.year, native.month, native.day)
            assert to_julian_day(d) == jdn
            assert from_julian_day(jdn) == d

    @pytest.mark.parametrize(
        "d", [16000229, 17000228, 17000301, 19000228, 19000301, 20000229, 1010101]
    )
    def test_round_trip_century_boundaries(self, d: int) -> None:
        """Test the round trip around century leap rules."""
        assert from_julian_day(to_julian_day(d)) == d

    def test_consecutive_julian_days(self) -> None:
        """Test that consecutive day numbers map to consecutive dates."""
        start = to_julian_day(18991201)
        native = datetime.date(1899, 12, 1)
        for offset in range(800):
            day = native + datetime.timedelta(days=offset)
            assert from_julian_day(start + offset) == create(day.year, day.month, day.day)


class TestDiff:
    """Tests for the signed day difference."""

    def test_one_year(self) -> None:
        """Test a full non-leap year."""
        assert diff(20150912, 20140912) == 365

    def test_leap_year(self) -> None:
        """Test a full year across February 29."""
        assert diff(20240912, 20230912) == 366

    def test_sign(self) -> None:
        """Test that diff is negative when the first date is earlier."""
        assert diff(20140912, 20150912) == -365

    def test_same_day(self) -> None:
        """Test zero difference."""
        assert diff(20230912, 20230912) == 0

    def test_across_month(self) -> None:
        """Test a difference across a month boundary."""
        assert diff(20240301, 20240228) == 2
        assert diff(20230301, 20230228) == 1


class TestAddDays:
    """Tests for day addition."""

    @pytest.mark.parametrize(
        "d,days,expected",
        [
            (20230912, 0, 20230912),
            (20230912, 1, 20230913),
            (20230930, 1, 20231001),
            (20231231, 1, 20240101),
            (20240228, 1, 20240229),
            (20240228, 2, 20240301),
            (20230228, 1, 20230301),
            (20240101, -1, 20231231),
            (20240301, -1, 20240229),
            (20140912, 365, 20150912),
            (20000101, -36524, 19000101),
        ],
    )
    def test_add_days(self, d: int, days: int, expected: int) -> None:
        """Test addition across month, year and leap boundaries."""
        assert add_days(d, days) == expected

    @pytest.mark.parametrize("n", [-100000, -1000, -1, 0, 1, 59, 366, 1000, 100000])
    def test_diff_inverts_add_days(self, n: int) -> None:
        """Test diff(add_days(x, n), x) == n."""
        for x in (20230912, 20240229, 19000101):
            assert diff(add_days(x, n), x) == n
