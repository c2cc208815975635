# tests/test_attributes.py

import pytest

import nongli
from nongli.attributes.registry import available_attributes, compute_attributes
from nongli.attributes.standard import sexagenary_label
from nongli.core import time as ct
from nongli.core.names import month_name_zh, solar_term


def test_sexagenary_day():
    assert sexagenary_label(ct.day_number(2000, 1, 1)) == "戊午"
    assert sexagenary_label(ct.day_number(2023, 1, 22)) == "庚辰"

    attrs = compute_attributes(ct.day_number(2000, 1, 1), ["sexagenary_day", "weekday"])
    assert attrs["sexagenary_index"] == 54
    assert (attrs["stem"], attrs["branch"]) == (4, 6)
    assert attrs["weekday"] == 5  # Saturday


def test_unknown_attribute():
    assert "weekday" in available_attributes()
    with pytest.raises(KeyError):
        compute_attributes(2451545, ["moon_phase"])


def test_lunar_date_attributes():
    d = nongli.lunar_date(2023, 1, 22, attributes=("sexagenary_day", "weekday"))
    assert d.attributes["sexagenary_label"] == "庚辰"
    assert d.attributes["weekday"] == 6  # Sunday


def test_names():
    assert month_name_zh(1) == "正月"
    assert month_name_zh(2, is_leap=True) == "閏二月"
    assert solar_term(18).name_zh == "冬至"
    assert solar_term(18).angle_deg == 270
    assert solar_term(19).is_major is False
    with pytest.raises(ValueError):
        solar_term(-1)
