# tests/test_time.py

import pytest
import random

from nongli.core import time as ct
from nongli.core.types import CivilDateTime


def test_civil_roundtrip():
    random.seed(42)
    for _ in range(5000):
        # positive Julian Dates only
        year = random.randint(-4700, 9999)
        if year == 0:
            continue
        month = random.randint(1, 12)
        day = random.randint(1, 28)
        if year == 1582 and month == 10 and 4 < day < 15:
            continue
        hour = random.randint(0, 23)
        minute = random.randint(0, 59)
        second = random.randint(0, 59)

        c = ct.civil_from_julian_day(ct.julian_day(year, month, day, hour, minute, second))
        assert c.date_tuple() == (year, month, day)
        assert (c.hour, c.minute) == (hour, minute)
        assert c.second == pytest.approx(second, abs=1e-3)


def test_known_epochs():
    # J2000.0 is 2000 January 1, 12h
    assert ct.julian_day(2000, 1, 1, 12) == ct.J2000
    assert ct.day_number(2000, 1, 1) == 2451545

    # Meeus, Example 7.a: 1957 October 4.81
    assert ct.julian_day(1957, 10, 4, 19, 26, 24) == pytest.approx(2436116.31, abs=1e-6)
    # Meeus, Example 7.b: 333 January 27, 12h (Julian calendar)
    assert ct.julian_day(333, 1, 27, 12) == 1842713.0
    # Meeus, Table 7.a: -1000 July 12.5 is 1001 BC here
    assert ct.julian_day(-1001, 7, 12, 12) == 1356001.0


def test_gregorian_reform():
    """Julian 1582-10-04 is followed directly by Gregorian 1582-10-15."""
    assert ct.julian_day(1582, 10, 4) == 2299159.5
    assert ct.julian_day(1582, 10, 15) == 2299160.5
    assert ct.day_number(1582, 10, 15) == ct.GREGORIAN_START_JDN

    assert ct.civil_from_julian_day(2299159.5).date_tuple() == (1582, 10, 4)
    assert ct.civil_from_julian_day(2299160.5).date_tuple() == (1582, 10, 15)

    with pytest.raises(ValueError):
        ct.julian_day(1582, 10, 10)


def test_no_year_zero():
    with pytest.raises(ValueError):
        ct.julian_day(0, 6, 1)

    # 1 BC directly precedes AD 1
    assert ct.day_number(1, 1, 1) - ct.day_number(-1, 12, 31) == 1
    assert ct.civil_from_julian_day(ct.julian_day(-1, 3, 1)).date_tuple() == (-1, 3, 1)


def test_invalid_fields():
    with pytest.raises(ValueError):
        ct.julian_day(2000, 13, 1)
    with pytest.raises(ValueError):
        ct.julian_day(2000, 1, 0)


def test_millisecond_carry():
    """A fraction within half a millisecond of midnight rolls into the next day."""
    jd = ct.julian_day(2023, 12, 31) + 1.0 - 1e-9
    c = ct.civil_from_julian_day(jd)
    assert c == CivilDateTime(2024, 1, 1, 0, 0, 0.0)


def test_day_number_is_strictly_increasing():
    random.seed(42)
    for _ in range(200):
        y = random.randint(1600, 2400)
        m = random.randint(1, 12)
        d = random.randint(1, 27)
        assert ct.day_number(y, m, d + 1) - ct.day_number(y, m, d) == 1


def test_shift_year_skips_zero():
    assert ct.shift_year(2000, 1) == 2001
    assert ct.shift_year(1, -1) == -1
    assert ct.shift_year(-1, 1) == 1
    assert ct.shift_year(-1, -1) == -2
    assert ct.shift_year(2, -3) == -2
    with pytest.raises(ValueError):
        ct.shift_year(0, 1)
