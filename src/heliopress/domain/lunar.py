# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Analytical lunar ephemeris (Meeus Ch. 47 simplified).

Accuracy ~0.5° in position. The Moon only enters the radiation pressure
model as a possible occluder, so this is ample.
"""
from dataclasses import dataclass

import numpy as np

from heliopress.domain.time_systems import AstroTime

# Obliquity of ecliptic (J2000, degrees)
_OBLIQUITY_DEG = 23.4393


@dataclass(frozen=True)
class MoonPosition:
    """Geocentric Moon position at a given epoch."""
    position_eci_m: tuple[float, float, float]
    right_ascension_rad: float
    declination_rad: float
    distance_m: float


def moon_position_eci(epoch: AstroTime) -> MoonPosition:
    """Geocentric ecliptic Moon coordinates rotated to the inertial equator frame.

    Args:
        epoch: Dynamical (TT) time.

    Returns:
        MoonPosition with inertial coordinates, RA, Dec, and distance.
    """
    T = epoch.to_julian_centuries_tt()

    # Fundamental arguments (degrees)
    L_prime = (218.3165 + 481267.8813 * T) % 360.0    # mean longitude
    D = (297.8502 + 445267.1115 * T) % 360.0          # mean elongation
    M = (357.5291 + 35999.0503 * T) % 360.0           # Sun mean anomaly
    M_prime = (134.9634 + 477198.8676 * T) % 360.0    # Moon mean anomaly
    F = (93.2721 + 483202.0175 * T) % 360.0           # argument of latitude

    D_r = float(np.radians(D))
    M_r = float(np.radians(M))
    Mp_r = float(np.radians(M_prime))
    F_r = float(np.radians(F))

    lam = L_prime + (
        6.289 * np.sin(Mp_r)
        - 1.274 * np.sin(2 * D_r - Mp_r)
        + 0.658 * np.sin(2 * D_r)
        - 0.214 * np.sin(2 * Mp_r)
        - 0.186 * np.sin(M_r)
        + 0.114 * np.sin(2 * F_r)
    )

    beta = (
        5.128 * np.sin(F_r)
        + 0.281 * np.sin(Mp_r + F_r)
        - 0.278 * np.sin(Mp_r - F_r)
        - 0.173 * np.sin(2 * D_r - F_r)
    )

    r_km = (
        385001.0
        - 20905.0 * np.cos(Mp_r)
        - 3699.0 * np.cos(2 * D_r - Mp_r)
        - 2956.0 * np.cos(2 * D_r)
        + 570.0 * np.cos(2 * Mp_r)
    )
    distance_m = float(r_km) * 1000.0

    lam_r = float(np.radians(lam))
    beta_r = float(np.radians(beta))
    eps_r = float(np.radians(_OBLIQUITY_DEG))

    # Ecliptic unit vector → equatorial by rotation about x by obliquity
    ecl = np.array([
        np.cos(beta_r) * np.cos(lam_r),
        np.cos(beta_r) * np.sin(lam_r),
        np.sin(beta_r),
    ])
    rot = np.array([
        [1.0, 0.0, 0.0],
        [0.0, np.cos(eps_r), -np.sin(eps_r)],
        [0.0, np.sin(eps_r), np.cos(eps_r)],
    ])
    eq = rot @ ecl

    ra_rad = float(np.arctan2(eq[1], eq[0]))
    dec_rad = float(np.arcsin(np.clip(eq[2], -1.0, 1.0)))
    pos = distance_m * eq

    return MoonPosition(
        position_eci_m=(float(pos[0]), float(pos[1]), float(pos[2])),
        right_ascension_rad=ra_rad,
        declination_rad=dec_rad,
        distance_m=distance_m,
    )
