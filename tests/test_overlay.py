import pytest

from nautchart.overlay import bearing_line, marker_positions, reading
from nautchart.projection import GeoPoint, forward


def test_marker_positions(square_bounds):
    markers = [GeoPoint(0, 0), GeoPoint(60, 30)]
    assert marker_positions(square_bounds, markers) == [
        forward(square_bounds, m) for m in markers
    ]


def test_line_inside_chart_is_unchanged(square_bounds):
    a, b = GeoPoint(0, 0), GeoPoint(60, 30)
    line = bearing_line(square_bounds, a, b)
    got = sorted((round(p.x, 6), round(p.y, 6)) for p in line)
    want = sorted((round(p.x, 6), round(p.y, 6))
                  for p in (forward(square_bounds, a), forward(square_bounds, b)))
    assert got == want


def test_line_is_clipped_at_chart_edge(square_bounds):
    line = bearing_line(square_bounds, GeoPoint(0, 0), GeoPoint(300, 0))
    assert len(line) == 2
    assert max(p.x for p in line) == pytest.approx(512)
    assert all(p.y == pytest.approx(256, abs=1) for p in line)


def test_line_outside_chart_is_empty(square_bounds):
    assert bearing_line(square_bounds, GeoPoint(0, -88), GeoPoint(40, -89)) == []


def test_line_with_pole_is_empty(square_bounds):
    assert bearing_line(square_bounds, GeoPoint(0, 0), GeoPoint(0, -90)) == []


def test_coincident_markers_have_no_line(square_bounds):
    p = GeoPoint(10, 10)
    assert bearing_line(square_bounds, p, p) == []


def test_reading(square_bounds):
    r = reading(square_bounds, GeoPoint(-10.5, 20), GeoPoint(15, 20))
    assert r["bearing"] == 90
    assert r["bearing_dms"] == "090°00′00″"
    assert r["from_dms"] == {"long": "010°30′00″W", "lat": "20°00′00″N"}
    assert r["to_dms"]["long"] == "015°00′00″E"
    assert len(r["line"]) == 2
