"""Marker dragging: turn pointer positions into geographic marker updates.

The host feeds pointer positions in client (window) coordinates.  The chart's
on-screen rectangle is supplied explicitly and must be refreshed with
``DragSession.reflow`` whenever the chart moves or resizes.
"""

import logging

from .projection import ChartBounds, ChartPoint, GeoPoint, Rect, inverse

logger = logging.getLogger(__name__)


def clamp(val: float, lo: float, hi: float) -> float:
    return max(min(val, hi), lo)


def center(rect: Rect) -> ChartPoint:
    return ChartPoint((rect.left + rect.right) / 2, (rect.top + rect.bottom) / 2)


def pointer_to_chart(root: Rect, pointer: ChartPoint, offset: ChartPoint) -> ChartPoint:
    """Chart-local pixel position for a pointer, clamped to the chart rectangle."""
    x = clamp(pointer.x - root.left - offset.x, 0, root.width)
    y = clamp(pointer.y - root.top - offset.y, 0, root.height)
    return ChartPoint(x, y)


def pointer_to_geo(bounds: ChartBounds, root: Rect, pointer: ChartPoint,
                   offset: ChartPoint) -> GeoPoint:
    return inverse(bounds, pointer_to_chart(root, pointer, offset))


class Marker:
    """A draggable marker; its position is replaced as a whole."""

    def __init__(self, position: GeoPoint):
        self.position = position

    @property
    def long(self) -> float:
        return self.position.long

    @property
    def lat(self) -> float:
        return self.position.lat

    def drag_to(self, geo: GeoPoint) -> None:
        self.position = geo


class DragSession:
    """Tracks one marker drag from pointer-down to pointer-up."""

    def __init__(self, bounds: ChartBounds, root: Rect):
        self.bounds = bounds
        self.root = root
        self.offset: ChartPoint | None = None

    @property
    def active(self) -> bool:
        return self.offset is not None

    def reflow(self, root: Rect) -> None:
        """Recompute layout after the chart's on-screen rectangle changed."""
        self.root = root

    def start(self, pointer: ChartPoint, element: Rect) -> None:
        # The drag moves the element's centre, not the grabbed point.
        c = center(element)
        self.offset = ChartPoint(pointer.x - c.x, pointer.y - c.y)
        logger.debug("Drag started with offset (%.1f, %.1f)", self.offset.x, self.offset.y)

    def move(self, pointer: ChartPoint, marker: Marker | None = None) -> GeoPoint:
        if self.offset is None:
            raise RuntimeError("move() called without an active drag")
        geo = pointer_to_geo(self.bounds, self.root, pointer, self.offset)
        if marker is not None:
            marker.drag_to(geo)
        return geo

    def end(self) -> None:
        self.offset = None
