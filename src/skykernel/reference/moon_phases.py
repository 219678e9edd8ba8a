from __future__ import annotations

from bisect import bisect_left

from ..core.types import MoonPhase, MoonPhaseQuarter
from .angles import wrap_turn
from .constants import MOON_PHASE_UPPER_LIMITS


def phase_from_fraction(fraction: float) -> MoonPhase:
    """
    Name the phase for a fraction of the synodic month (0 = new moon).

    Each MoonPhase owns the interval ending at its entry in
    MOON_PHASE_UPPER_LIMITS (inclusive). The table is cyclic: past the last
    limit we are back at NEW.
    """
    i = bisect_left(MOON_PHASE_UPPER_LIMITS, wrap_turn(fraction))
    if i >= len(MOON_PHASE_UPPER_LIMITS):
        return MoonPhase.NEW
    return MoonPhase(i)


def quarter_from_fraction(fraction: float) -> MoonPhaseQuarter:
    """Nearest principal phase: windows of 1/4 centred on 0, 1/4, 1/2, 3/4."""
    q = int((wrap_turn(fraction) + 0.125) * 4.0) % 4
    return MoonPhaseQuarter(q)
