# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ephemeris provider backed by the analytical Sun and Moon series.

Positions are returned in kilometres, the native unit of planetary
ephemerides; force models scale to metres themselves.
"""
from enum import Enum

from heliopress.domain.lunar import moon_position_eci
from heliopress.domain.solar import sun_position_eci
from heliopress.domain.time_systems import AstroTime


class CelestialBody(Enum):
    SUN = "sun"
    MOON = "moon"


class AnalyticalEphemeris:
    """Low-precision geocentric ephemeris for the Sun and Moon (km)."""

    def position(
        self,
        epoch: AstroTime,
        body: CelestialBody,
    ) -> tuple[float, float, float]:
        if body is CelestialBody.SUN:
            pos_m = sun_position_eci(epoch).position_eci_m
        elif body is CelestialBody.MOON:
            pos_m = moon_position_eci(epoch).position_eci_m
        else:
            raise ValueError(f"Unsupported body: {body!r}")
        return (pos_m[0] / 1000.0, pos_m[1] / 1000.0, pos_m[2] / 1000.0)
