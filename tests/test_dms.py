import math

import pytest

from nautchart.dms import format_bearing, format_dms, format_lat, format_long
from nautchart.projection import GeoPoint, bearing


def test_half_degree():
    assert format_dms(45.5, "N", "S", 2) == "45°30′00″N"


def test_negative_uses_negative_suffix():
    assert format_dms(-10.5, "E", "W", 3) == "010°30′00″W"


def test_carries_into_seconds():
    assert format_dms(-(10 + 1.0036 / 3600), "E", "W", 3) == "010°00′01″W"


def test_components_are_zero_padded():
    value = 12 + 5 / 60 + 7.5 / 3600
    assert format_dms(value, "N", "S", 2) == "12°05′07″N"


def test_negative_zero_is_positive():
    assert format_dms(-0.0, "E", "W", 3) == "000°00′00″E"


def test_overflowing_degrees_keep_fixed_width():
    assert format_dms(1234, "", "", 3) == "234°00′00″"


@pytest.mark.parametrize("formatter", [format_long, format_lat, format_bearing])
def test_none_passes_through(formatter):
    assert formatter(None) is None


def test_none_passes_through_raw():
    assert format_dms(None, "N", "S", 2) is None


def test_adapters():
    assert format_long(-122.5) == "122°30′00″W"
    assert format_long(3.25) == "003°15′00″E"
    assert format_lat(-33.75) == "33°45′00″S"
    assert format_bearing(90) == "090°00′00″"
    assert format_bearing(0) == "000°00′00″"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_has_no_dms_form(value):
    assert format_dms(value, "N", "S", 2) is None
    assert format_lat(value) is None


def test_bearing_past_the_pole_formats_as_none(square_bounds):
    value = bearing(square_bounds, GeoPoint(0, 0), GeoPoint(0, 100))
    assert math.isnan(value)
    assert format_bearing(value) is None
