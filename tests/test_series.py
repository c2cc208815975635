# tests/test_series.py

import math

import pytest

from nongli.engines.astro import elp2000, nutation, vsop87
from nongli.engines.astro.series import (
    CosineSeries,
    PolySineSeries,
    TieredSeries,
    frozen_table,
    horner,
)


def test_horner():
    assert horner((1.0, 2.0, 3.0), 2.0) == 17.0
    assert horner((), 5.0) == 0.0


def test_frozen_table_is_read_only():
    tab = frozen_table([(1.0, 0.0, 0.0)], 3)
    assert not tab.flags.writeable
    with pytest.raises(ValueError):
        tab[0, 0] = 2.0

    for arr in (vsop87.EARTH_LONGITUDE.tiers[0].table, elp2000.MOON_LONGITUDE.tiers[0].table,
                nutation.NUTATION):
        assert not arr.flags.writeable


def test_series_evaluation():
    cos = CosineSeries("c", frozen_table([(2.0, 0.0, 1.0)], 3))
    assert cos(math.pi) == pytest.approx(-2.0)

    sin = PolySineSeries("s", frozen_table([(3.0, math.pi / 2, 0.0, 0.0, 0.0, 0.0)], 6))
    assert sin(10.0) == pytest.approx(3.0)

    const1 = CosineSeries("one", frozen_table([(1.0, 0.0, 0.0)], 3))
    const2 = CosineSeries("two", frozen_table([(2.0, 0.0, 0.0)], 3))
    tiered = TieredSeries("t", (const1, const2), scale=0.5)
    assert tiered(3.0) == pytest.approx(0.5 * (1.0 + 2.0 * 3.0))
    assert tiered.n_terms() == 2


def test_truncated_term_counts():
    assert vsop87.EARTH_LONGITUDE.n_terms() == 60 + 20 + 10 + 3 + 3 + 1
    assert vsop87.EARTH_LATITUDE.n_terms() == 10 + 2
    assert elp2000.MOON_LONGITUDE.n_terms() == 55 + 8 + 3
    assert elp2000.MOON_LATITUDE.n_terms() == 55 + 8
    assert nutation.NUTATION.shape[0] == 10


def test_earth_at_j2000():
    # L0 at t=0 is Σa·cos(b); the leading term dominates
    assert vsop87.earth_longitude(0.0) == pytest.approx(1.7519, abs=5e-3)
    assert abs(vsop87.earth_latitude(0.0)) < 1e-5
