# tests/test_solar_lunar.py

import pytest

from nongli.core import time as ct
from nongli.reference import astro_args as aa
from nongli.reference import lunar, solar


def test_time_arguments():
    # Meeus, Example 47.a: 1992 April 12, 0h TD
    assert aa.T_centuries(2448724.5) == pytest.approx(-0.077221081451, abs=1e-12)
    assert aa.T_millennia(2448724.5) == pytest.approx(-0.0077221081451, abs=1e-13)


def test_wrapping():
    assert aa.wrap_deg(-30.0) == 330.0
    assert aa.wrap_deg(720.0) == 0.0
    assert aa.wrap180(350.0) == -10.0
    assert aa.wrap_rad(-1.0) == pytest.approx(aa.TAU - 1.0)


def test_precession_rate():
    assert aa.precession_in_longitude_rad(0.0) == 0.0
    # about 50.3 arcsec per year
    one_year = aa.precession_in_longitude_rad(0.001)
    assert one_year == pytest.approx(aa.arcsec_to_rad(50.29), rel=1e-3)


def test_meeus_example_25b_apparent_sun():
    """1992 October 13.0 TD: apparent longitude 199°54'21.818"."""
    assert solar.sun_longitude(2448908.5) == pytest.approx(199.906060, abs=1e-3)
    geo = solar.geometric_position(2448908.5)
    assert geo.longitude_deg == pytest.approx(199.907372, abs=1e-3)
    assert abs(geo.latitude_deg * 3600.0) < 2.0


def test_meeus_example_47a_moon():
    """1992 April 12, 0h TD: geometric longitude 133.162655, latitude -3.229126."""
    lon = lunar.moon_ecliptic_longitude(2448724.5)
    assert aa.wrap180(lon - 133.162655) == pytest.approx(0.0, abs=1e-2)
    assert lunar.moon_ecliptic_latitude(2448724.5) == pytest.approx(-3.229126, abs=1e-2)

    pos = lunar.moon_position(2448724.5)
    assert pos.longitude_deg == pytest.approx(lon, abs=1e-9)


def test_sun_advances_about_one_degree_per_day():
    jd0 = ct.julian_day(2023, 1, 1)
    prev = solar.sun_longitude(jd0)
    for k in range(1, 366):
        cur = solar.sun_longitude(jd0 + k)
        assert 0.0 <= cur < 360.0
        assert 0.9 < (cur - prev) % 360.0 < 1.1
        prev = cur


def test_moon_stays_near_the_ecliptic():
    jd0 = ct.julian_day(2023, 1, 1)
    for k in range(0, 740, 3):
        jd = jd0 + 0.7 * k
        assert abs(lunar.moon_ecliptic_latitude(jd)) < 5.35
        assert 0.0 <= lunar.moon_ecliptic_longitude(jd) < 360.0
