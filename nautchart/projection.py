"""Web (spherical) Mercator projection: lon/lat degrees <-> chart pixels, and bearings."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    top: float
    bottom: float
    left: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @classmethod
    def from_dict(cls, data: dict) -> "Rect":
        return cls(
            top=float(data["top"]),
            bottom=float(data["bottom"]),
            left=float(data["left"]),
            right=float(data["right"]),
        )

    def to_dict(self) -> dict:
        return {"top": self.top, "bottom": self.bottom,
                "left": self.left, "right": self.right}


@dataclass(frozen=True)
class ChartBounds:
    """Geographic extent (degrees) and pixel extent of one chart image.

    earth.right may exceed 180 when the chart spans the anti-meridian.
    """

    earth: Rect
    screen: Rect

    @classmethod
    def from_dict(cls, data: dict) -> "ChartBounds":
        return cls(earth=Rect.from_dict(data["earth"]),
                   screen=Rect.from_dict(data["screen"]))

    def to_dict(self) -> dict:
        return {"earth": self.earth.to_dict(), "screen": self.screen.to_dict()}


@dataclass(frozen=True)
class GeoPoint:
    long: float
    lat: float

    @classmethod
    def from_dict(cls, data: dict) -> "GeoPoint":
        return cls(long=float(data["long"]), lat=float(data["lat"]))

    def to_dict(self) -> dict:
        return {"long": self.long, "lat": self.lat}


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float

    @classmethod
    def from_dict(cls, data: dict) -> "ChartPoint":
        return cls(x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


# math.log / math.exp raise at the poles; the projection wants IEEE results.
def _ln(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _width(bounds: ChartBounds) -> float:
    """Chart pixel width; also the Mercator scale denominator."""
    return bounds.screen.right - bounds.screen.left


def _lambda_0(bounds: ChartBounds) -> float:
    return math.radians(bounds.earth.left)


def _theta_to_y(w: float, theta: float) -> float:
    return w / (2 * math.pi) * _ln(math.tan(math.pi / 4 + theta / 2))


def _y_to_theta(w: float, y: float) -> float:
    return 2 * math.atan(_exp(y * 2 * math.pi / w)) - math.pi / 2


def _y_top(bounds: ChartBounds) -> float:
    return _theta_to_y(_width(bounds), math.radians(bounds.earth.top))


def forward(bounds: ChartBounds, geo: GeoPoint) -> ChartPoint:
    """Project a geographic point to chart pixels (y down, not clamped)."""
    w = _width(bounds)
    x = w / (2 * math.pi) * (math.radians(geo.long) - _lambda_0(bounds))
    y = _y_top(bounds) - _theta_to_y(w, math.radians(geo.lat))
    return ChartPoint(x, y)


def inverse(bounds: ChartBounds, chart: ChartPoint) -> GeoPoint:
    """Exact inverse of forward()."""
    w = _width(bounds)
    lam = _lambda_0(bounds) + chart.x * 2 * math.pi / w
    theta = _y_to_theta(w, _y_top(bounds) - chart.y)
    return GeoPoint(math.degrees(lam), math.degrees(theta))


def bearing(bounds: ChartBounds, start: GeoPoint, end: GeoPoint) -> float:
    """Initial bearing from start to end, clockwise from chart-up, in degrees.

    Measured on the projected plane, so it is a rhumb-line (constant course)
    bearing rather than a great-circle one.
    """
    a = forward(bounds, start)
    b = forward(bounds, end)
    dx = b.x - a.x
    dy = a.y - b.y  # chart y grows downward
    if dy == 0:
        if dx == 0:
            return 0
        if dx > 0:
            return 90
        return 270
    theta = math.degrees(math.atan(dx / dy))
    return theta + (180 if dy < 0 else 0) + (360 if dx < 0 and dy > 0 else 0)
