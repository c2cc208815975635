# tests/test_calendar.py

import pytest

import nongli
from nongli.core import time as ct
from nongli.core.errors import CalendarBuildError, ConvergenceError
from nongli.engines import calendar as cal
from nongli.engines.specs import DEFAULT_PARAMS, SolverParams


@pytest.mark.parametrize(
    "year, leap",
    [
        (1984, 10),
        (1993, 3),
        (1995, 8),
        (2006, 7),
        (2009, 5),
        (2012, 4),
        (2014, 9),
        (2017, 6),
        (2020, 4),
        (2023, 2),
        (2025, 6),
        (2033, 11),
    ],
)
def test_known_leap_months(year, leap):
    ycal = nongli.build_year_calendar(year)
    assert ycal.leap_month == leap
    assert len(ycal) == 13
    ordinals = [m.ordinal for m in ycal]
    assert ordinals.count(leap) == 2
    assert [m.is_leap for m in ycal].index(True) == ordinals.index(leap) + 1


@pytest.mark.parametrize("year", [2019, 2021, 2022, 2024])
def test_common_years(year):
    ycal = nongli.build_year_calendar(year)
    assert ycal.leap_month is None
    assert [m.ordinal for m in ycal] == list(range(1, 13))


@pytest.mark.parametrize(
    "year, new_year",
    [(2020, (2020, 1, 25)), (2023, (2023, 1, 22)), (2024, (2024, 2, 10)), (2025, (2025, 1, 29))],
)
def test_lunar_new_year(year, new_year):
    ycal = nongli.build_year_calendar(year)
    assert ycal.months[0].start_civil.date_tuple() == new_year


def test_year_2023_structure():
    ycal = nongli.build_year_calendar(2023)
    assert ycal.offset_days == ct.OFFSET_BEIJING

    leap = next(m for m in ycal if m.is_leap)
    assert leap.start_civil.date_tuple() == (2023, 3, 22)
    assert not any(t.is_major for t in leap.solar_terms)

    # months tile the lunar year without gaps
    for a, b in zip(ycal.months, ycal.months[1:]):
        assert a.end_day_number == b.day_number
    for m in ycal:
        assert m.length_days in (29, 30)
        assert m.is_major == (m.length_days == 30)
    total = sum(m.length_days for m in ycal)
    assert total == ct.day_number(2024, 2, 10) - ct.day_number(2023, 1, 22)

    # the 24 terms of the civil year, minor cold through winter solstice
    assert len(ycal.solar_terms) == 24
    assert ycal.solar_terms[0].term.name_zh == "小寒"
    assert ycal.solar_terms[-1].term.name_zh == "冬至"


def test_month_eleven_holds_the_solstice():
    lc = cal.LunisolarCalendar()
    tables = lc.year_tables(2023)
    ws = tables.solar_terms[cal.PRIOR_SOLSTICE_SLOT]
    nm = tables.new_moons
    assert nm[0].day_number <= ws.day_number < nm[1].day_number
    ws = tables.solar_terms[cal.SOLSTICE_SLOT]
    assert ws.term.name == "Winter Solstice"


def test_solstice_spans():
    lc = cal.LunisolarCalendar()
    for year in range(2010, 2022):
        first, second = lc.solstice_spans(lc.year_tables(year))
        for span in (first, second):
            assert span.n_months in (12, 13)
            assert (span.leap_month is not None) == (span.n_months == 13)
        assert second.first_month == first.n_months


def test_term_slots():
    assert cal.term_slot(0) == (-1, 16)
    assert cal.term_slot(2) == (-1, 18)
    assert cal.term_slot(3) == (0, 19)
    assert cal.term_slot(26) == (0, 18)
    assert cal.term_slot(27) == (1, 19)
    assert cal.term_slot(50) == (1, 18)


def test_month_ordinal():
    assert [cal.month_ordinal(j, None) for j in range(14)] == [11, 12] + list(range(1, 13))
    # leap at index 4 repeats month 2
    assert [cal.month_ordinal(j, 4) for j in range(2, 7)] == [1, 2, 2, 3, 4]


def test_display_window():
    assert list(cal.display_window(None)) == list(range(2, 14))
    assert list(cal.display_window(4)) == list(range(2, 15))
    assert list(cal.display_window(2)) == list(range(3, 15))
    assert list(cal.display_window(15)) == list(range(2, 14))


def test_solver_failure_is_reported_as_build_error():
    params = DEFAULT_PARAMS.tweak(solver=SolverParams(max_iter=1))
    with pytest.raises(CalendarBuildError) as info:
        nongli.build_year_calendar(2023, params=params)
    assert info.value.stage == "events"
    assert info.value.year == 2023
    assert isinstance(info.value.__cause__, ConvergenceError)


def test_civil_offsets():
    assert nongli.civil_offset(1929) == ct.OFFSET_BEIJING
    assert nongli.civil_offset(1900) == ct.OFFSET_BEIJING_LMT
    assert nongli.build_year_calendar(1900).offset_days == ct.OFFSET_BEIJING_LMT


def test_year_listings():
    terms = nongli.solar_terms_for_year(2023)
    assert [t.term.index for t in terms][:3] == [19, 20, 21]
    for a, b in zip(terms, terms[1:]):
        assert 14.0 < b.jd - a.jd < 16.0

    moons = nongli.new_moons_for_year(2023)
    assert len(moons) == 14
    assert moons[0].civil.date_tuple() == (2023, 1, 22)
    for a, b in zip(moons, moons[1:]):
        assert 29.1 < b.jd - a.jd < 29.9


def test_lunar_date():
    d = nongli.lunar_date(2023, 1, 22)
    assert (d.lunar_year, d.month, d.is_leap_month, d.day) == (2023, 1, False, 1)

    d = nongli.lunar_date(2023, 1, 21)
    assert (d.lunar_year, d.month, d.day) == (2022, 12, 30)

    d = nongli.lunar_date(2023, 3, 22)
    assert (d.month, d.is_leap_month, d.day) == (2, True, 1)

    # mid-autumn festival
    d = nongli.lunar_date(2023, 9, 29)
    assert (d.month, d.day) == (8, 15)
    assert d.attributes is None


@pytest.mark.parametrize("year", [-1, 1, 1581, 1582])
def test_years_next_to_gaps(year):
    """Year 1 borrows terms from 1 BC; 1581 and 1582 cross the Gregorian reform."""
    ycal = nongli.build_year_calendar(year)
    assert len(ycal) in (12, 13)
    assert ycal.months[0].ordinal == 1
    assert ycal.months[-1].ordinal == 12
    for a, b in zip(ycal.months, ycal.months[1:]):
        assert a.end_day_number == b.day_number
    for m in ycal:
        assert m.length_days in (29, 30)


def test_lunar_date_before_first_new_year():
    d = nongli.lunar_date(1, 1, 1)
    assert d.lunar_year == -1
    assert d.month in (11, 12)
    assert 1 <= d.day <= 30


def test_solar_terms_of_reform_year():
    terms = nongli.solar_terms_for_year(1582)
    assert len(terms) == 24
    for a, b in zip(terms, terms[1:]):
        assert 14.0 < b.jd - a.jd < 16.0


def test_year_zero_rejected():
    with pytest.raises(ValueError):
        nongli.build_year_calendar(0)


def test_calendar_info(caplog):
    lc = cal.LunisolarCalendar()
    info = lc.info()
    assert info["solver"]["max_iter"] == 50
    assert info["bracket_window_days"] == 30
    assert info["offsets"]["reform_year"] == 1929

    with caplog.at_level("DEBUG", logger="nongli.engines.calendar"):
        lc.build_year(2024)
    assert "building 2024" in caplog.text
