# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Shadow function for solar radiation pressure.

Fraction of the solar disk visible from the spacecraft, with the Earth
(at the frame origin) and optionally the Moon acting as occluders.

Conical model (Montenbruck & Gill, Satellite Orbits, Sec. 3.4.2):
the Sun and the occluder are treated as discs of apparent radius
a = asin(R_sun / |r_sun - r|) and b = asin(R_B / |r - r_B|) separated by
the apparent angle c. The visible fraction follows from the overlap area
of the two discs:

    c >= a + b          → 1            (no occultation)
    c <= b - a          → 0            (umbra)
    c <= a - b          → 1 - b²/a²    (annular)
    otherwise           → 1 - A/(π a²) (penumbra, A = overlap area)

Cylindrical model: the shadow is a cylinder of the occluder's radius
along the anti-Sun direction. Fraction is 0 inside, 1 outside.

The same routine serves any radiation model driven by solar flux.
"""
import math
from enum import Enum

import numpy as np

from heliopress.domain.errors import DegenerateGeometryError
from heliopress.domain.physical_constants import R_EARTH, R_MOON, R_SUN
from heliopress.domain.spacecraft import finite_position


class ShadowModel(Enum):
    CYLINDRICAL = "cylindrical"
    CONICAL = "conical"


class EclipseType(Enum):
    NONE = "none"
    PENUMBRA = "penumbra"
    ANNULAR = "annular"
    UMBRA = "umbra"


# Severity order used to combine several occluders
_SEVERITY = {
    EclipseType.NONE: 0,
    EclipseType.PENUMBRA: 1,
    EclipseType.ANNULAR: 2,
    EclipseType.UMBRA: 3,
}


def _conical_occultation(
    sat: np.ndarray,
    sun: np.ndarray,
    body: np.ndarray,
    body_radius_m: float,
    sun_radius_m: float,
) -> tuple[float, EclipseType]:
    """Visible solar fraction for a single spherical occluder."""
    s = sat - body            # occluder centre → spacecraft
    d_sun = sun - sat         # spacecraft → Sun
    s_mag = float(np.linalg.norm(s))
    d_mag = float(np.linalg.norm(d_sun))

    if s_mag <= body_radius_m:
        raise DegenerateGeometryError(
            f"spacecraft lies inside occluding body "
            f"(distance {s_mag:.3f} m <= radius {body_radius_m:.3f} m)")
    if d_mag <= sun_radius_m:
        raise DegenerateGeometryError(
            f"spacecraft lies inside the Sun (distance {d_mag:.3f} m)")

    a = math.asin(sun_radius_m / d_mag)
    b = math.asin(body_radius_m / s_mag)
    cos_c = float(np.dot(-s, d_sun)) / (s_mag * d_mag)
    c = math.acos(max(-1.0, min(1.0, cos_c)))

    if c >= a + b:
        return 1.0, EclipseType.NONE
    if c <= b - a:
        return 0.0, EclipseType.UMBRA
    if c <= a - b:
        return 1.0 - (b * b) / (a * a), EclipseType.ANNULAR

    # Partial overlap of the two discs (circular segments)
    x = (c * c + a * a - b * b) / (2.0 * c)
    y = math.sqrt(max(0.0, a * a - x * x))
    overlap = (a * a * math.acos(max(-1.0, min(1.0, x / a)))
               + b * b * math.acos(max(-1.0, min(1.0, (c - x) / b)))
               - c * y)
    fraction = 1.0 - overlap / (math.pi * a * a)
    return min(1.0, max(0.0, fraction)), EclipseType.PENUMBRA


def _cylindrical_occultation(
    sat: np.ndarray,
    sun: np.ndarray,
    body: np.ndarray,
    body_radius_m: float,
) -> tuple[float, EclipseType]:
    s = sat - body
    if float(np.linalg.norm(s)) <= body_radius_m:
        raise DegenerateGeometryError("spacecraft lies inside occluding body")

    to_sun = sun - body
    to_sun_mag = float(np.linalg.norm(to_sun))
    if to_sun_mag < 1e-3:
        raise DegenerateGeometryError("occluder coincides with the Sun")
    sun_hat = to_sun / to_sun_mag

    proj = float(np.dot(s, sun_hat))
    if proj >= 0.0:
        return 1.0, EclipseType.NONE
    perp = float(np.linalg.norm(s - proj * sun_hat))
    if perp < body_radius_m:
        return 0.0, EclipseType.UMBRA
    return 1.0, EclipseType.NONE


def _occultations(
    spacecraft_position_m: tuple[float, float, float],
    sun_position_m: tuple[float, float, float],
    moon_position_m: tuple[float, float, float] | None,
    model: ShadowModel,
    earth_radius_m: float,
    moon_radius_m: float,
    sun_radius_m: float,
) -> list[tuple[float, EclipseType]]:
    sat = finite_position("spacecraft_position_m", spacecraft_position_m)
    sun = finite_position("sun_position_m", sun_position_m)

    occluders = [(np.zeros(3), earth_radius_m)]
    if moon_position_m is not None:
        occluders.append((finite_position("moon_position_m", moon_position_m), moon_radius_m))

    results = []
    for centre, radius in occluders:
        if model is ShadowModel.CONICAL:
            results.append(_conical_occultation(sat, sun, centre, radius, sun_radius_m))
        elif model is ShadowModel.CYLINDRICAL:
            results.append(_cylindrical_occultation(sat, sun, centre, radius))
        else:
            raise ValueError(f"Unknown shadow model: {model!r}")
    return results


def shadow_fraction(
    spacecraft_position_m: tuple[float, float, float],
    sun_position_m: tuple[float, float, float],
    moon_position_m: tuple[float, float, float] | None = None,
    model: ShadowModel = ShadowModel.CONICAL,
    earth_radius_m: float = R_EARTH,
    moon_radius_m: float = R_MOON,
    sun_radius_m: float = R_SUN,
) -> float:
    """Fraction of solar flux reaching the spacecraft, in [0, 1].

    Args:
        spacecraft_position_m: Geocentric inertial spacecraft position (m).
        sun_position_m: Geocentric inertial Sun position (m).
        moon_position_m: Geocentric inertial Moon position (m), or None to
            ignore lunar eclipses.
        model: Eclipse geometry model.
        earth_radius_m: Earth radius override (m).
        moon_radius_m: Moon radius override (m).
        sun_radius_m: Sun radius override (m).

    Returns:
        1.0 in full sunlight, 0.0 in umbra, in between in penumbra.
        With two occluders the darker one wins.

    Raises:
        DegenerateGeometryError: spacecraft inside an occluder or the Sun,
            or a non-finite position component.
    """
    results = _occultations(
        spacecraft_position_m, sun_position_m, moon_position_m, model,
        earth_radius_m, moon_radius_m, sun_radius_m,
    )
    return min(fraction for fraction, _ in results)


def classify_eclipse(
    spacecraft_position_m: tuple[float, float, float],
    sun_position_m: tuple[float, float, float],
    moon_position_m: tuple[float, float, float] | None = None,
    model: ShadowModel = ShadowModel.CONICAL,
    earth_radius_m: float = R_EARTH,
    moon_radius_m: float = R_MOON,
    sun_radius_m: float = R_SUN,
) -> EclipseType:
    """Most severe eclipse region the spacecraft is in."""
    results = _occultations(
        spacecraft_position_m, sun_position_m, moon_position_m, model,
        earth_radius_m, moon_radius_m, sun_radius_m,
    )
    return max((kind for _, kind in results), key=_SEVERITY.__getitem__)
