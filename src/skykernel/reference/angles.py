from __future__ import annotations

import math
from typing import Tuple


# ------------------------------------------------------------
# Range reduction
#
# Python's % already follows the sign of the divisor, so negative inputs
# land in [0, m). A tiny negative x can still round up to m itself; those
# are folded back to 0 to keep the range half-open.
# Non-finite inputs come out as NaN (inf % m is nan); callers that need a
# defined answer must not pass them.
# ------------------------------------------------------------

def _wrap(x: float, m: float) -> float:
    y = x % m
    if y >= m:
        y = 0.0
    return y


def normalize_hours(x_h: float) -> float:
    """Wrap hours to [0,24)."""
    return _wrap(x_h, 24.0)


def normalize_degrees(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    return _wrap(x_deg, 360.0)


def wrap_turn(x_turn: float) -> float:
    """Wrap turns to [0,1)."""
    return _wrap(x_turn, 1.0)


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return normalize_degrees(deg + 180.0) - 180.0


def map_to_minus90_90(deg: float) -> float:
    """
    Fold an angle onto [-90, 90] by reflection, as used for latitudes and
    declinations that went over a pole.
    """
    y = normalize_degrees(deg)
    if y > 270.0:
        return y - 360.0
    if y > 90.0:
        return 180.0 - y
    return y


# ------------------------------------------------------------
# Degree-exact trigonometry
# ------------------------------------------------------------

def sincos_deg(x_deg: float) -> Tuple[float, float]:
    """
    (sin x, cos x) for x in degrees.

    The argument is reduced to the nearest quarter turn before converting
    to radians, so multiples of 90 degrees give exact 0 and +-1 (plain
    math.cos(math.radians(90)) is 6.1e-17, not 0).

    math.remainder is exact and odd, so sincos_deg(-x) mirrors sincos_deg(x)
    bit for bit and small angles keep their full precision.
    """
    if not math.isfinite(x_deg):
        return math.nan, math.nan

    r = math.remainder(x_deg, 90.0)  # r in [-45, 45]
    q = int(round((x_deg - r) / 90.0)) % 4
    t = math.radians(r)
    s, c = math.sin(t), math.cos(t)

    if q == 0:
        return s, c
    if q == 1:
        return c, -s
    if q == 2:
        return -s, -c
    return -c, s

