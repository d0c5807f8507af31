import dataclasses
import math

import pytest

from ecotrip.geo import (
    EARTH_RADIUS_KM,
    GeoPoint,
    great_circle_km,
    has_value,
    is_usable,
    make_point,
)


def test_make_point_keeps_latitude_then_longitude():
    point = make_point(48.8566, 2.3522)
    assert point == GeoPoint(latitude=48.8566, longitude=2.3522)


def test_points_are_immutable(paris):
    with pytest.raises(dataclasses.FrozenInstanceError):
        paris.latitude = 0.0  # type: ignore[misc]


def test_distance_to_same_point_is_zero(paris):
    distance = great_circle_km(
        paris.latitude,
        paris.longitude,
        paris.latitude,
        paris.longitude,
    )
    assert distance == 0


def test_distance_is_symmetric(paris, london):
    assert paris.distance_to(london) == pytest.approx(london.distance_to(paris))


def test_paris_london_reference_distance(paris, london):
    assert 343 < paris.distance_to(london) < 344


def test_quarter_meridian_matches_radius():
    # Equator to pole is a quarter of the circumference.
    distance = great_circle_km(0.0, 10.0, 90.0, 10.0)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM / 2)


def test_out_of_range_coordinates_still_give_a_distance():
    distance = great_circle_km(100.0, 190.0, 10.0, 190.0)
    assert distance >= 0
    assert not math.isnan(distance)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.5, True),
        (-3, True),
        ("2.5", True),
        (0, False),
        (0.0, False),
        (None, False),
        (float("nan"), False),
        ("", False),
        ("far", False),
        ([], False),
        (10**400, False),
    ],
)
def test_has_value(value, expected):
    assert has_value(value) is expected


def test_usable_point(paris):
    assert paris.is_usable
    assert is_usable(paris)


@pytest.mark.parametrize(
    "point",
    [
        None,
        GeoPoint(latitude=0.0, longitude=2.35),
        GeoPoint(latitude=48.85, longitude=0.0),
        GeoPoint(latitude=float("nan"), longitude=2.35),
        object(),
    ],
)
def test_unusable_points(point):
    assert not is_usable(point)


def test_string_coordinates_are_coerced(paris, london):
    distance = great_circle_km("48.8566", "2.3522", "51.5074", "-0.1278")
    assert distance == pytest.approx(paris.distance_to(london))
