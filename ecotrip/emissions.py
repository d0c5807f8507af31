"""CO2 estimates for trips given a distance, two points or a whole path."""

from __future__ import annotations

from enum import IntEnum
from itertools import pairwise
from typing import TYPE_CHECKING, Sequence

from .geo import GeoPoint, great_circle_km, has_value, is_usable
from .logger import DEFAULT_LOGGER, Logger
from .modes import (
    CAR_TRIP_MULTIPLIER,
    EMISSION_FACTORS,
    ZERO_EMISSION_MODES,
    Mode,
)

if TYPE_CHECKING:
    ModeLike = Mode | str

# Minimum number of points needed to describe a single leg.
MIN_PATH_POINTS = 2


class EmissionError(IntEnum):
    """Negative sentinels returned in place of a gram count."""

    MISSING_INPUT = -1
    UNKNOWN_MODE = -2


def emission_for_distance(
    distance: float | None,
    mode: ModeLike,
    logger: Logger = DEFAULT_LOGGER,
) -> float:
    """Return the estimated grams of CO2 emitted over `distance` kilometers.

    Parameters
    ----------
    distance:
        Trip length in kilometers.
    mode:
        `Mode` member or any key accepted by `Mode.from_value`.
    logger:
        Diagnostic sink for rejected inputs. Defaults to a stderr logger.

    Returns
    -------
    float
        Grams of CO2, or an `EmissionError` sentinel.

    Notes
    -----
    A zero distance is indistinguishable from a missing one and yields
    `EmissionError.MISSING_INPUT`, even for walking or cycling. The check on
    `distance` runs before the mode is resolved.

    """
    if not has_value(distance):
        logger.warning("emission.distance.missing", distance=distance, mode=mode)
        return EmissionError.MISSING_INPUT

    try:
        resolved = Mode.from_value(mode)
    except (TypeError, ValueError):
        logger.warning("emission.mode.unknown", mode=mode)
        return EmissionError.UNKNOWN_MODE

    distance_km = float(distance)  # type: ignore[arg-type]
    if resolved is Mode.CAR:
        grams = distance_km * CAR_TRIP_MULTIPLIER * EMISSION_FACTORS[resolved]
    elif resolved in ZERO_EMISSION_MODES:
        grams = 0.0
    else:
        grams = distance_km * EMISSION_FACTORS[resolved]

    logger.info(
        "emission.computed",
        mode=resolved.value,
        distance_km=f"{distance_km:.3f}",
        grams=f"{grams:.1f}",
    )
    return grams


def emission_from_points(
    start: GeoPoint | None,
    end: GeoPoint | None,
    mode: ModeLike,
    logger: Logger = DEFAULT_LOGGER,
) -> float:
    """Return the estimated grams of CO2 for a straight trip from `start` to `end`.

    Both points must be usable (see `GeoPoint.is_usable`), otherwise
    `EmissionError.MISSING_INPUT` is returned. The great-circle distance is
    then priced through `emission_for_distance`.
    """
    for role, point in (("start", start), ("end", end)):
        if not is_usable(point):
            logger.warning("emission.point.missing", role=role, point=point)
            return EmissionError.MISSING_INPUT

    distance = _leg_km(start, end)  # type: ignore[arg-type]
    logger.debug("emission.points.distance", distance_km=f"{distance:.3f}")
    return emission_for_distance(distance, mode, logger=logger)


def emission_along_path(
    points: Sequence[GeoPoint],
    mode: ModeLike,
    logger: Logger = DEFAULT_LOGGER,
) -> float:
    """Return the estimated grams of CO2 for travelling along a polyline.

    The path length is the sum of the great-circle legs between consecutive
    points.
    """
    if len(points) < MIN_PATH_POINTS:
        logger.warning("emission.path.too_short", points=len(points))
        return EmissionError.MISSING_INPUT

    for index, point in enumerate(points):
        if not is_usable(point):
            logger.warning("emission.point.missing", role=f"path[{index}]", point=point)
            return EmissionError.MISSING_INPUT

    distance = sum(_leg_km(a, b) for a, b in pairwise(points))
    logger.debug(
        "emission.path.distance",
        legs=len(points) - 1,
        distance_km=f"{distance:.3f}",
    )
    return emission_for_distance(distance, mode, logger=logger)


def emissions_by_mode(
    distance: float | None,
    logger: Logger = DEFAULT_LOGGER,
) -> dict[Mode, float]:
    """Price the same distance under every mode, in declaration order."""
    if not has_value(distance):
        logger.warning("emission.distance.missing", distance=distance)
        return dict.fromkeys(Mode, EmissionError.MISSING_INPUT)
    return {mode: emission_for_distance(distance, mode, logger=logger) for mode in Mode}


def _leg_km(start: GeoPoint, end: GeoPoint) -> float:
    """Great-circle length of one leg; accepts any object with lat/lon fields."""
    return great_circle_km(start.latitude, start.longitude, end.latitude, end.longitude)
