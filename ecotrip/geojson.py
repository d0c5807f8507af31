"""Read trip points out of GeoJSON documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from .geo import GeoPoint, make_point

FEATURE_TYPE = "Feature"
FEATURE_COLLECTION_TYPE = "FeatureCollection"
POINT_TYPE = "Point"
LINESTRING_TYPE = "LineString"
MIN_COORDINATE_COMPONENTS = 2


def load_points(path: str | Path) -> list[GeoPoint]:
    """Load a `.geojson` file and return the points it describes.

    Parameters
    ----------
    path:
        GeoJSON file holding a FeatureCollection of Points, a LineString or a
        single Point.

    Returns
    -------
    list[GeoPoint]
        Points in document order.

    """
    path = Path(path)
    if not path.exists():
        msg = f"GeoJSON file not found: {path}"
        raise FileNotFoundError(msg)

    raw_contents = path.read_bytes().strip()
    if not raw_contents:
        msg = f"GeoJSON file is empty: {path}"
        raise ValueError(msg)

    try:
        document = orjson.loads(raw_contents)
    except orjson.JSONDecodeError as exc:
        msg = f"Unable to parse JSON: {exc}"
        raise ValueError(msg) from exc

    return points_from_geojson(document)


def points_from_geojson(document: Any) -> list[GeoPoint]:  # noqa: ANN401
    """Return the points of a FeatureCollection, LineString or Point document."""
    if not isinstance(document, dict):
        msg = "GeoJSON document must be an object."
        raise TypeError(msg)

    kind = document.get("type")
    if kind == FEATURE_COLLECTION_TYPE:
        features = document.get("features")
        if not isinstance(features, list) or not features:
            msg = "FeatureCollection must contain at least one feature."
            raise ValueError(msg)
        return [
            point_from_feature(feature, idx + 1) for idx, feature in enumerate(features)
        ]

    geometry = _geometry_of(document, index=1)
    if geometry.get("type") == LINESTRING_TYPE:
        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, (list, tuple)):
            msg = "LineString coordinates must be a list or tuple."
            raise TypeError(msg)
        return [
            _point_from_coordinates(pair, idx + 1)
            for idx, pair in enumerate(coordinates)
        ]

    return [point_from_feature(document, 1)]


def point_from_feature(feature: Any, index: int) -> GeoPoint:  # noqa: ANN401
    """Return a `GeoPoint` from a Point Feature or a bare Point geometry.

    GeoJSON stores positions as `[lon, lat]`; the result is `(lat, lon)`.
    """
    geometry = _geometry_of(feature, index)
    if geometry.get("type") != POINT_TYPE:
        msg = f"Feature #{index} must be a Point geometry."
        raise ValueError(msg)
    return _point_from_coordinates(geometry.get("coordinates"), index)


def _geometry_of(feature: Any, index: int) -> dict:  # noqa: ANN401
    if not isinstance(feature, dict):
        msg = f"Feature #{index} must be an object."
        raise TypeError(msg)

    if feature.get("type") != FEATURE_TYPE:
        return feature

    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        msg = f"Feature #{index} is missing its geometry."
        raise TypeError(msg)
    return geometry


def _point_from_coordinates(coordinates: Any, index: int) -> GeoPoint:  # noqa: ANN401
    if not isinstance(coordinates, (list, tuple)):
        msg = f"Feature #{index} coordinates must be a list or tuple."
        raise TypeError(msg)
    if len(coordinates) < MIN_COORDINATE_COMPONENTS:
        msg = f"Feature #{index} is missing longitude/latitude values."
        raise ValueError(msg)

    try:
        lon = float(coordinates[0])
        lat = float(coordinates[1])
    except (TypeError, ValueError) as exc:
        msg = f"Feature #{index} coordinates must be numeric."
        raise ValueError(msg) from exc

    return make_point(lat, lon)
