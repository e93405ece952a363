"""Overlay geometry in chart pixels: marker positions and the clipped bearing line."""

import math

from shapely.geometry import LineString, box

from .dms import format_bearing, format_lat, format_long
from .projection import ChartBounds, ChartPoint, GeoPoint, bearing, forward


def marker_positions(bounds: ChartBounds, markers: list[GeoPoint]) -> list[ChartPoint]:
    return [forward(bounds, m) for m in markers]


def bearing_line(bounds: ChartBounds, start: GeoPoint, end: GeoPoint) -> list[ChartPoint]:
    """Segment between two markers clipped to the chart. Empty if it misses the chart."""
    a = forward(bounds, start)
    b = forward(bounds, end)
    if not all(math.isfinite(v) for v in (a.x, a.y, b.x, b.y)):
        return []
    if (a.x, a.y) == (b.x, b.y):
        return []

    clip_box = box(0, 0, bounds.screen.width, bounds.screen.height)
    clipped = LineString([(a.x, a.y), (b.x, b.y)]).intersection(clip_box)
    if clipped.is_empty or not isinstance(clipped, LineString):
        return []
    coords = list(clipped.coords)
    if len(coords) < 2:
        return []
    return [ChartPoint(x, y) for x, y in coords]


def reading(bounds: ChartBounds, start: GeoPoint, end: GeoPoint) -> dict:
    """Bearing read-out between two markers, with display strings."""
    value = bearing(bounds, start, end)
    return {
        "bearing": value,
        "bearing_dms": format_bearing(value),
        "from_dms": {"long": format_long(start.long), "lat": format_lat(start.lat)},
        "to_dms": {"long": format_long(end.long), "lat": format_lat(end.lat)},
        "line": [p.to_dict() for p in bearing_line(bounds, start, end)],
    }
