from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum

@dataclass(frozen=True)
class EquatorialCoordinates:
    right_ascension: float  # degrees
    declination: float      # degrees

@dataclass(frozen=True)
class GeographicCoordinates:
    """Observer location, longitude positive East."""
    longitude: float  # degrees
    latitude: float   # degrees

class MoonPhaseQuarter(IntEnum):
    NEW = 0
    FIRST_QUARTER = 1
    FULL = 2
    LAST_QUARTER = 3

class MoonPhase(IntEnum):
    NEW = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL = 4
    WANING_GIBBOUS = 5
    LAST_QUARTER = 6
    WANING_CRESCENT = 7
