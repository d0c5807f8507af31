"""Geospatial helpers shared across the emission estimators."""

from __future__ import annotations

import math
from dataclasses import dataclass

import osmnx as ox

EARTH_RADIUS_KM = 6371.0
_METERS_PER_KM = 1000.0

_GREAT_CIRCLE = getattr(ox.distance, "great_circle", None)
if _GREAT_CIRCLE is None:
    try:
        _GREAT_CIRCLE = ox.distance.great_circle_vec
    except AttributeError as exc:  # pragma: no cover - legacy fallback guard
        msg = "OSMnx distance helpers lack both `great_circle` and `great_circle_vec`."
        raise AttributeError(msg) from exc


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """Immutable `(latitude, longitude)` pair expressed in degrees."""

    latitude: float
    longitude: float

    @property
    def is_usable(self) -> bool:
        """Return True when both components are set and non-zero.

        A point sitting exactly on the equator or the prime meridian is
        reported as unusable; callers relying on such points must pass a
        distance instead.
        """
        return is_usable(self)

    def distance_to(self, other: GeoPoint) -> float:
        """Return the great-circle distance to `other` in kilometers."""
        return great_circle_km(
            self.latitude,
            self.longitude,
            other.latitude,
            other.longitude,
        )


def make_point(lat: float, lon: float) -> GeoPoint:
    """Build a `GeoPoint` from latitude and longitude degrees."""
    return GeoPoint(latitude=lat, longitude=lon)


def great_circle_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Return the great-circle distance between two lat/lon points in kilometers.

    Uses the Haversine formula on a sphere of radius `EARTH_RADIUS_KM`.
    Coordinates are coerced with `float` and not range-checked; out-of-range
    degrees still yield a mathematically defined distance.
    """
    meters = _GREAT_CIRCLE(
        float(lat1),
        float(lon1),
        float(lat2),
        float(lon2),
        EARTH_RADIUS_KM * _METERS_PER_KM,
    )
    return float(meters) / _METERS_PER_KM


def is_usable(point: object) -> bool:
    """Return True when `point` exposes a set latitude and longitude."""
    if point is None:
        return False
    return has_value(getattr(point, "latitude", None)) and has_value(
        getattr(point, "longitude", None),
    )


def has_value(value: object) -> bool:
    """Return True for numbers that are neither zero, NaN nor missing.

    Integers too large for a float count as missing.
    """
    if value is None:
        return False
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return False
    return number != 0 and not math.isnan(number)
