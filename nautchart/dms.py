"""Degrees/minutes/seconds display strings for longitudes, latitudes and bearings."""

import math


def _pad(num: int, width: int) -> str:
    """Zero-pad to exactly `width` characters, keeping the last digits on overflow."""
    return str(num).zfill(width)[-width:]


def format_dms(value: float | None, positive_suffix: str, negative_suffix: str,
               degree_width: int) -> str | None:
    """Format signed decimal degrees as e.g. 045°30′00″N.

    None is passed through unchanged so callers can show "no value".  NaN and
    infinities (points at or past a pole) have no DMS form and also give None.
    """
    if value is None or not math.isfinite(value):
        return None

    positive = value >= 0
    value = abs(value)

    whole_degrees = math.floor(value)
    minutes = (value - whole_degrees) * 60
    whole_minutes = math.floor(minutes)
    seconds = (minutes - whole_minutes) * 60
    whole_seconds = math.floor(seconds)

    return (
        f"{_pad(whole_degrees, degree_width)}°"
        f"{_pad(whole_minutes, 2)}′"
        f"{_pad(whole_seconds, 2)}″"
        f"{positive_suffix if positive else negative_suffix}"
    )


def format_long(value: float | None) -> str | None:
    return format_dms(value, "E", "W", 3)


def format_lat(value: float | None) -> str | None:
    return format_dms(value, "N", "S", 2)


def format_bearing(value: float | None) -> str | None:
    return format_dms(value, "", "", 3)
