import random

import pytest

from nautchart.charts import get_chart
from nautchart.projection import ChartBounds, GeoPoint, Rect


@pytest.fixture
def square_bounds() -> ChartBounds:
    return ChartBounds(
        earth=Rect(top=85, bottom=-85, left=-180, right=180),
        screen=Rect(top=0, bottom=512, left=0, right=512),
    )


@pytest.fixture
def world_bounds() -> ChartBounds:
    return get_chart("world").bounds


@pytest.fixture
def random_points() -> list[GeoPoint]:
    rng = random.Random(1234)
    return [
        GeoPoint(long=rng.uniform(-180.0, 200.0), lat=rng.uniform(-80.0, 80.0))
        for _ in range(500)
    ]
