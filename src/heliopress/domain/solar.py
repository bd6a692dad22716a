# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

Low-precision Sun position using Meeus "Astronomical Algorithms" Ch. 25 /
Vallado simplified algorithm. Accuracy ~1 arcminute, well inside what
radiation pressure and shadow geometry need.

"""
from dataclasses import dataclass

import numpy as np

from heliopress.domain.physical_constants import AU_METERS
from heliopress.domain.time_systems import AstroTime


@dataclass(frozen=True)
class SunPosition:
    """Geocentric Sun position at a given epoch."""
    position_eci_m: tuple[float, float, float]  # inertial position in meters
    right_ascension_rad: float
    declination_rad: float
    distance_m: float  # Earth-Sun distance in meters


def sun_position_eci(epoch: AstroTime) -> SunPosition:
    """Low-precision analytical solar ephemeris.

    Args:
        epoch: Dynamical (TT) time.

    Returns:
        SunPosition with inertial coordinates, RA, Dec, and distance.
    """
    T = epoch.to_julian_centuries_tt()

    # Mean anomaly (degrees)
    M_deg = (357.5291 + 35999.0503 * T) % 360.0
    M_rad = float(np.radians(M_deg))

    # Ecliptic longitude (degrees)
    L_deg = (280.4665 + 36000.7698 * T + 1.9146 * float(np.sin(M_rad))
             + 0.0200 * float(np.sin(2.0 * M_rad))) % 360.0
    L_rad = float(np.radians(L_deg))

    # Obliquity of the ecliptic (degrees)
    eps_rad = float(np.radians(23.4393 - 0.01300 * T))

    ra_rad = float(np.arctan2(np.cos(eps_rad) * np.sin(L_rad), np.cos(L_rad)))
    dec_rad = float(np.arcsin(np.sin(eps_rad) * np.sin(L_rad)))

    r_au = 1.00014 - 0.01671 * float(np.cos(M_rad)) - 0.00014 * float(np.cos(2.0 * M_rad))
    distance_m = r_au * AU_METERS

    cos_dec = float(np.cos(dec_rad))
    x = distance_m * float(np.cos(ra_rad)) * cos_dec
    y = distance_m * float(np.sin(ra_rad)) * cos_dec
    z = distance_m * float(np.sin(dec_rad))

    return SunPosition(
        position_eci_m=(x, y, z),
        right_ascension_rad=ra_rad,
        declination_rad=dec_rad,
        distance_m=distance_m,
    )
