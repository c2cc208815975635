# tests/test_events.py

import pytest

from nongli.core import time as ct
from nongli.core.errors import BracketError
from nongli.core.names import SPRING_EQUINOX, WINTER_SOLSTICE
from nongli.engines import events as ev
from nongli.engines.specs import BracketParams
from nongli.reference import astro_args as aa
from nongli.reference.solar import sun_longitude

BEIJING = ct.OFFSET_BEIJING


def test_solar_term_estimates():
    assert ev.estimate_solar_term(2023, SPRING_EQUINOX) == ct.julian_day(2023, 3, 20)
    assert ev.estimate_solar_term(2023, WINTER_SOLSTICE) == ct.julian_day(2023, 12, 22)
    assert ev.estimate_solar_term(2023, 19) == ct.julian_day(2023, 1, 4)
    assert ev.estimate_solar_term(2023, 9) == ct.julian_day(2023, 8, 7)


def test_spring_equinox_2023():
    """2023-03-20 21:24 UT, already 03-21 in Beijing."""
    jd = ev.solar_term_jd(2023, SPRING_EQUINOX)
    ut = ev.to_civil(jd, 0.0)
    assert ut.date_tuple() == (2023, 3, 20)
    assert (ut.hour, ut.minute) in ((21, 23), (21, 24), (21, 25))
    assert ev.to_civil(jd, BEIJING).date_tuple() == (2023, 3, 21)


def test_terms_hit_their_longitudes():
    for index in range(24):
        jd = ev.solar_term_jd(2023, index)
        assert aa.wrap180(sun_longitude(jd) - 15.0 * index) == pytest.approx(0.0, abs=1e-6)


def test_term_event_fields():
    e = ev.solar_term_event(2023, WINTER_SOLSTICE, BEIJING)
    assert e.term.name_zh == "冬至"
    assert e.is_major
    assert e.civil.date_tuple() == (2023, 12, 22)
    assert e.day_number == ct.day_number(2023, 12, 22)


def test_new_moon_forward_from_new_year():
    """2023-01-21 20:53 UT, which is 01-22 in Beijing."""
    jd = ev.new_moon_jd(ct.julian_day(2023, 1, 1) - BEIJING, "forward")
    assert ev.to_civil(jd, 0.0).date_tuple() == (2023, 1, 21)
    assert ev.to_civil(jd, BEIJING).date_tuple() == (2023, 1, 22)
    assert aa.wrap180(ev.elongation(jd)) == pytest.approx(0.0, abs=1e-6)


def test_new_moon_backward_from_solstice():
    ws = ev.solar_term_jd(2022, WINTER_SOLSTICE)
    jd = ev.new_moon_jd(ws, "backward")
    assert jd <= ws
    assert ws - jd < 30.0
    assert ev.to_civil(jd, 0.0).date_tuple() == (2022, 11, 23)


def test_new_moon_nearby_and_directions():
    seed = ct.julian_day(2023, 1, 21)
    assert ev.new_moon_jd(seed, "nearby") == pytest.approx(
        ev.new_moon_jd(ct.julian_day(2023, 1, 1), "forward"), abs=1e-6)

    with pytest.raises(ValueError):
        ev.new_moon_jd(seed, "sideways")


def test_forward_bracket_gives_up():
    just_after = ev.new_moon_jd(ct.julian_day(2023, 1, 1), "forward") + 1.0
    with pytest.raises(BracketError) as info:
        ev.estimate_new_moon_forward(just_after, bracket=BracketParams(window_days=3))
    assert info.value.direction == "forward"


def test_bad_term_index():
    with pytest.raises(ValueError):
        ev.solar_term_jd(2023, 24)


def test_seed_inside_reform_gap():
    """Cold dew is seeded at the 7th of October, which 1582 skipped."""
    assert ev.estimate_solar_term(1582, 13) == ct.julian_day(1582, 10, 1) + 6.0
    jd = ev.solar_term_jd(1582, 13)
    assert aa.wrap180(sun_longitude(jd) - 195.0) == pytest.approx(0.0, abs=1e-6)
    # still Julian reckoning: late September
    y, m, d = ev.to_civil(jd, 0.0).date_tuple()
    assert (y, m) == (1582, 9) and 26 <= d <= 30


def _new_moon_2023_01():
    return ev.new_moon_jd(ct.julian_day(2023, 1, 1), "forward")


def test_backward_bracket_overshoot(caplog):
    """A slow assumed elongation rate jumps back past the new moon; the walk returns."""
    nm = _new_moon_2023_01()
    slow = BracketParams(synodic_month=60.0)
    with caplog.at_level("DEBUG", logger="nongli.engines.events"):
        seed = ev.estimate_new_moon_backward(nm + 5.0, bracket=slow)
    assert nm - 1.0 <= seed < nm
    assert "overshoot" in caplog.text

    with pytest.raises(BracketError) as info:
        ev.estimate_new_moon_backward(nm + 5.0, bracket=BracketParams(window_days=2, synodic_month=60.0))
    assert info.value.direction == "backward"


def test_backward_bracket_walk_back():
    """A fast assumed rate stops short of the new moon and walks back to it."""
    nm = _new_moon_2023_01()
    seed = ev.estimate_new_moon_backward(nm + 10.0, bracket=BracketParams(synodic_month=20.0))
    assert nm - 1.0 < seed <= nm

    with pytest.raises(BracketError) as info:
        ev.estimate_new_moon_backward(nm + 10.0, bracket=BracketParams(window_days=1, synodic_month=20.0))
    assert info.value.direction == "backward"


def test_backward_bracket_near_wrap():
    nm = _new_moon_2023_01()
    seed = ev.estimate_new_moon_backward(nm + 0.5)
    assert nm - 1.0 < seed < nm

    with pytest.raises(BracketError) as info:
        ev.estimate_new_moon_backward(nm + 0.5, bracket=BracketParams(window_days=1))
    assert info.value.direction == "backward"
