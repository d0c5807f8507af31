"""Per-mode bindings of the generic emission estimators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from .emissions import emission_for_distance, emission_from_points
from .logger import DEFAULT_LOGGER, Logger
from .modes import EMISSION_FACTORS, Mode

if TYPE_CHECKING:
    from .geo import GeoPoint

DistanceEstimator = Callable[..., float]
PointsEstimator = Callable[..., float]


def _bind_distance(mode: Mode) -> DistanceEstimator:
    def estimate(distance: float | None, logger: Logger = DEFAULT_LOGGER) -> float:
        return emission_for_distance(distance, mode, logger=logger)

    estimate.__name__ = f"{mode.value}_emission_for_distance"
    estimate.__qualname__ = estimate.__name__
    estimate.__doc__ = f"Grams of CO2 for `distance` kilometers by {mode.value}."
    return estimate


def _bind_points(mode: Mode) -> PointsEstimator:
    def estimate(
        start: GeoPoint | None,
        end: GeoPoint | None,
        logger: Logger = DEFAULT_LOGGER,
    ) -> float:
        return emission_from_points(start, end, mode, logger=logger)

    estimate.__name__ = f"{mode.value}_emission_from_points"
    estimate.__qualname__ = estimate.__name__
    estimate.__doc__ = f"Grams of CO2 from `start` to `end` by {mode.value}."
    return estimate


def walk_emission() -> float:
    """Walking emits nothing whatever the trip."""
    return EMISSION_FACTORS[Mode.WALK]


def bike_emission() -> float:
    """Cycling emits nothing whatever the trip."""
    return EMISSION_FACTORS[Mode.BIKE]


walk_emission_for_distance = _bind_distance(Mode.WALK)
walk_emission_from_points = _bind_points(Mode.WALK)
bike_emission_for_distance = _bind_distance(Mode.BIKE)
bike_emission_from_points = _bind_points(Mode.BIKE)
metro_emission_for_distance = _bind_distance(Mode.METRO)
metro_emission_from_points = _bind_points(Mode.METRO)
regional_rail_emission_for_distance = _bind_distance(Mode.REGIONAL_RAIL)
regional_rail_emission_from_points = _bind_points(Mode.REGIONAL_RAIL)
tram_emission_for_distance = _bind_distance(Mode.TRAM)
tram_emission_from_points = _bind_points(Mode.TRAM)
bus_emission_for_distance = _bind_distance(Mode.BUS)
bus_emission_from_points = _bind_points(Mode.BUS)
car_emission_for_distance = _bind_distance(Mode.CAR)
car_emission_from_points = _bind_points(Mode.CAR)
commuter_rail_emission_for_distance = _bind_distance(Mode.COMMUTER_RAIL)
commuter_rail_emission_from_points = _bind_points(Mode.COMMUTER_RAIL)
