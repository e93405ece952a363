"""Chart definitions: raster source, projection name and geographic/screen bounds."""

import logging
import os
from dataclasses import dataclass

from PIL import Image

from .projection import ChartBounds, GeoPoint, Rect

logger = logging.getLogger(__name__)

MERCATOR = "mercator"


class ProjectionError(ValueError):
    """Raised when a chart is not in a projection the engine supports."""


@dataclass(frozen=True)
class Chart:
    name: str
    src: str
    projection: str
    bounds: ChartBounds

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "src": self.src,
            "projection": self.projection,
            "bounds": self.bounds.to_dict(),
        }


# Charts the server knows about, keyed by name.
CHARTS: dict[str, Chart] = {
    "world": Chart(
        name="world",
        src="world.png",
        projection=MERCATOR,
        bounds=ChartBounds(
            earth=Rect(top=83.600842, bottom=-58.508473,
                       left=-169.110266, right=190.486279),
            screen=Rect(top=0, bottom=665, left=0, right=1010),
        ),
    ),
}

# Where the two markers start on a freshly opened chart.
DEFAULT_MARKERS = (
    GeoPoint(long=0.0, lat=0.0),
    GeoPoint(long=60.0, lat=30.0),
)


def get_chart(name: str) -> Chart:
    try:
        return CHARTS[name]
    except KeyError:
        raise KeyError(f"Unknown chart: {name!r}") from None


def require_mercator(chart: Chart) -> Chart:
    """Reject charts the Mercator engine cannot handle."""
    if chart.projection != MERCATOR:
        raise ProjectionError("Projection must be Mercator")
    return chart


def screen_from_image(path: str) -> Rect:
    """Pixel extent of a chart raster, with the origin at its top-left corner."""
    with Image.open(path) as img:
        width, height = img.size
    logger.debug("Chart image %s is %dx%d", path, width, height)
    return Rect(top=0, bottom=height, left=0, right=width)


def chart_from_image(name: str, path: str, earth: Rect,
                     projection: str = MERCATOR) -> Chart:
    """Build a chart whose screen bounds come from the raster's size."""
    bounds = ChartBounds(earth=earth, screen=screen_from_image(path))
    return Chart(name=name, src=os.path.basename(path),
                 projection=projection, bounds=bounds)
