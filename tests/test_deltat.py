# tests/test_deltat.py

import logging

import numpy as np
import pytest

from nongli.engines.astro import deltat as dt


def test_segments_are_nearly_continuous():
    """The jump at each boundary is smaller than the variation over the preceding segment."""
    m = dt.DEFAULT_DELTAT
    t = np.linspace(0.0, 10.0, 101)
    for i in range(1, m.n_segments):
        left = m.segment_seconds(i - 1, 10.0)
        right = m.segment_seconds(i, 0.0)
        values = [m.segment_seconds(i - 1, float(x)) for x in t]
        assert abs(left - right) <= max(values) - min(values)


def test_tabulated_values():
    m = dt.DEFAULT_DELTAT
    assert m.seconds_at_year(1900.0) == pytest.approx(-2.3)
    assert m.seconds_at_year(1990.0) == pytest.approx(51.0 + 1.29 * 5 - 0.026 * 25 + 0.0032 * 125)
    assert dt.delta_t_seconds(2451545.0) == pytest.approx(64.7)
    assert dt.delta_t_days(2451545.0) == pytest.approx(64.7 / 86400.0)


def test_fractional_year():
    assert dt.fractional_year(2451545.0) == 2000.0
    assert dt.fractional_year(2451545.0 + 365.2425) == pytest.approx(2001.0)


def test_extrapolation_uses_end_segments(caplog):
    m = dt.DEFAULT_DELTAT
    assert m.segment_index(-5000.0) == 0
    assert m.segment_index(7000.0) == m.n_segments - 1

    dt._warn_extrapolation.cache_clear()
    with caplog.at_level(logging.WARNING, logger="nongli.engines.astro.deltat"):
        late = m.seconds_at_year(7000.0)
        early = m.seconds_at_year(-5000.0)

    assert late == pytest.approx(m.segment_seconds(19, (7000.0 - 2150.0) / 385.0))
    assert early == pytest.approx(m.segment_seconds(0, -1000.0 / 350.0))
    assert "after" in caplog.text
    assert "before" in caplog.text


def test_model_validation():
    with pytest.raises(ValueError):
        dt.CubicSegmentDeltaT("bad", (0.0, 1.0), ())
    with pytest.raises(ValueError):
        dt.CubicSegmentDeltaT("bad", (1.0, 0.0), ((0.0, 0.0, 0.0, 0.0),))


def test_info():
    info = dt.DEFAULT_DELTAT.info()
    assert info["segments"] == 20
    assert info["range"] == (-4000.0, 6000.0)
    assert info["validated_until"] == 2150.0


def test_last_segment_is_not_extrapolation(caplog):
    m = dt.DEFAULT_DELTAT
    dt._warn_extrapolation.cache_clear()
    with caplog.at_level(logging.WARNING, logger="nongli.engines.astro.deltat"):
        m.seconds_at_year(2200.0)
        m.seconds_at_year(5999.0)
    assert caplog.records == []
