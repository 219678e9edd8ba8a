from __future__ import annotations

import math

from ..core.types import EquatorialCoordinates, GeographicCoordinates
from .angles import normalize_degrees, sincos_deg
from .constants import H2DEG
from .sidereal import _lst_hours


def angular_distance(c1: EquatorialCoordinates, c2: EquatorialCoordinates) -> float:
    """
    Great-circle angular distance in degrees [0,180].

    Uses the atan2 form (Meeus, AA p. 116) instead of the spherical law of
    cosines, which loses digits near 0 and 180 degrees.
    """
    sd1, cd1 = sincos_deg(c1.declination)
    sd2, cd2 = sincos_deg(c2.declination)
    sda, cda = sincos_deg(c2.right_ascension - c1.right_ascension)

    x = cd1 * sd2 - sd1 * cd2 * cda
    y = cd2 * sda
    z = sd1 * sd2 + cd1 * cd2 * cda

    return math.degrees(math.atan2(math.hypot(x, y), z))


def parallactic_angle(jd: float, equ: EquatorialCoordinates, geo: GeographicCoordinates) -> float:
    """
    Parallactic angle q in degrees (Meeus, AA eq. 14.1):

      tan q = sin H / (tan phi cos delta - sin delta cos H)

    H is the local hour angle from mean sidereal time. For an object at a
    celestial pole (cos delta == 0) H is meaningless; q is then 180 for
    observers on or north of the equator and 0 south of it.
    """
    sin_dec, cos_dec = sincos_deg(equ.declination)
    if cos_dec == 0.0:
        return 180.0 if geo.latitude >= 0.0 else 0.0

    lmst_deg = _lst_hours(jd, geo.longitude, 2) * H2DEG
    sin_ha, cos_ha = sincos_deg(normalize_degrees(lmst_deg - equ.right_ascension))
    tan_lat = math.tan(math.radians(geo.latitude))

    return math.degrees(math.atan2(sin_ha, tan_lat * cos_dec - sin_dec * cos_ha))
