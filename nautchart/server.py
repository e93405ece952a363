"""Flask application exposing the chart projection and bearing engine as JSON."""

import logging
import math
import os

from flask import Flask, abort, jsonify, request, send_from_directory

from .charts import CHARTS, DEFAULT_MARKERS, ProjectionError, get_chart, require_mercator
from .dms import format_lat, format_long
from .drag import pointer_to_geo
from .overlay import reading
from .projection import ChartPoint, GeoPoint, Rect, forward, inverse

logger = logging.getLogger(__name__)

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(BASE_DIR, "static")
CHART_DIR = os.environ.get("NAUTCHART_CHART_DIR", os.path.join(STATIC_DIR, "charts"))

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")


class ParameterError(Exception):
    pass


@app.errorhandler(ParameterError)
def _bad_request(exc):
    return jsonify({"error": f"Invalid parameters: {exc}"}), 400


@app.errorhandler(ProjectionError)
def _bad_projection(exc):
    return jsonify({"error": str(exc)}), 422


def _payload() -> dict:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ParameterError("expected a JSON object")
    return data


def _lookup_chart(name):
    try:
        return get_chart(name)
    except KeyError as exc:
        abort(404, description=exc.args[0])


def _chart_bounds(data: dict):
    name = data.get("chart", "world")
    if not isinstance(name, str):
        raise ParameterError("chart must be a string")
    return require_mercator(_lookup_chart(name)).bounds


def _number(value: float) -> float | None:
    """JSON has no NaN/Infinity; off-chart values at the poles become null."""
    return value if math.isfinite(value) else None


def _geo_response(geo: GeoPoint) -> dict:
    return {
        "long": _number(geo.long),
        "lat": _number(geo.lat),
        "long_dms": format_long(geo.long),
        "lat_dms": format_lat(geo.lat),
    }


@app.errorhandler(404)
def _not_found(exc):
    return jsonify({"error": exc.description}), 404


@app.route("/api/charts")
def list_charts():
    return jsonify({
        "charts": [c.to_dict() for c in CHARTS.values()],
        "markers": [m.to_dict() for m in DEFAULT_MARKERS],
    })


@app.route("/api/charts/<name>")
def chart_config(name):
    return jsonify(_lookup_chart(name).to_dict())


@app.route("/charts/<path:filename>")
def chart_image(filename):
    return send_from_directory(CHART_DIR, filename)


@app.route("/api/forward", methods=["POST"])
def api_forward():
    data = _payload()
    bounds = _chart_bounds(data)
    try:
        geo = GeoPoint.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ParameterError(exc) from exc
    point = forward(bounds, geo)
    return jsonify({"x": _number(point.x), "y": _number(point.y)})


@app.route("/api/inverse", methods=["POST"])
def api_inverse():
    data = _payload()
    bounds = _chart_bounds(data)
    try:
        point = ChartPoint.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ParameterError(exc) from exc
    return jsonify(_geo_response(inverse(bounds, point)))


@app.route("/api/bearing", methods=["POST"])
def api_bearing():
    data = _payload()
    bounds = _chart_bounds(data)
    try:
        start = GeoPoint.from_dict(data["from"])
        end = GeoPoint.from_dict(data["to"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ParameterError(exc) from exc
    result = reading(bounds, start, end)
    result["bearing"] = _number(result["bearing"])
    return jsonify(result)


@app.route("/api/drag", methods=["POST"])
def api_drag():
    data = _payload()
    bounds = _chart_bounds(data)
    try:
        root = Rect.from_dict(data["root"])
        pointer = ChartPoint.from_dict(data["pointer"])
        offset = ChartPoint.from_dict(data.get("offset", {"x": 0, "y": 0}))
    except (KeyError, TypeError, ValueError) as exc:
        raise ParameterError(exc) from exc
    geo = pointer_to_geo(bounds, root, pointer, offset)
    logger.debug("Drag to (%.1f, %.1f) -> %s", pointer.x, pointer.y, geo)
    return jsonify(_geo_response(geo))
