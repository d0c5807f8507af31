"""Transportation modes and their per-kilometer CO2 emission factors."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Mode(str, Enum):
    """Closed set of supported transportation modes."""

    WALK = "walk"
    BIKE = "bike"
    METRO = "metro"
    REGIONAL_RAIL = "regional_rail"
    TRAM = "tram"
    BUS = "bus"
    CAR = "car"
    COMMUTER_RAIL = "commuter_rail"

    @classmethod
    def from_value(cls, value: Mode | str) -> Mode:
        """Normalize a mode key, accepting the legacy French RATP keys too."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"Mode must be a string, got {type(value).__name__}."
            raise TypeError(msg)
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        if key in MODE_ALIASES:
            return MODE_ALIASES[key]
        try:
            return cls(key)
        except ValueError as exc:
            valid = ", ".join(mode.value for mode in cls)
            msg = f"Invalid mode: {value!r}. Expected one of {{{valid}}}."
            raise ValueError(msg) from exc


WALK = Mode.WALK
BIKE = Mode.BIKE
METRO = Mode.METRO
REGIONAL_RAIL = Mode.REGIONAL_RAIL
TRAM = Mode.TRAM
BUS = Mode.BUS
CAR = Mode.CAR
COMMUTER_RAIL = Mode.COMMUTER_RAIL

# Keys used by the RATP emission table (https://www.ratp.fr/categorie-faq/5041).
MODE_ALIASES: Mapping[str, Mode] = MappingProxyType(
    {
        "marche": Mode.WALK,
        "velo": Mode.BIKE,
        "vélo": Mode.BIKE,
        "rer": Mode.REGIONAL_RAIL,
        "tramway": Mode.TRAM,
        "voiture": Mode.CAR,
        "transilien": Mode.COMMUTER_RAIL,
    },
)

# Grams of CO2 per kilometer traveled.
EMISSION_FACTORS: Mapping[Mode, float] = MappingProxyType(
    {
        Mode.WALK: 0.0,
        Mode.BIKE: 0.0,
        Mode.METRO: 3.8,
        Mode.REGIONAL_RAIL: 3.9,
        Mode.TRAM: 3.1,
        Mode.BUS: 95.4,
        Mode.CAR: 206.0,
        Mode.COMMUTER_RAIL: 6.4,
    },
)

# Car trips are inflated to account for access and empty return legs.
CAR_TRIP_MULTIPLIER = 1.2

ZERO_EMISSION_MODES = frozenset({Mode.WALK, Mode.BIKE})
PUBLIC_TRANSPORT_MODES = frozenset(
    {Mode.METRO, Mode.REGIONAL_RAIL, Mode.TRAM, Mode.BUS, Mode.COMMUTER_RAIL},
)
