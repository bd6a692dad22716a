# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Physical constants for solar radiation pressure modelling.

Values follow the GPSTk/STK HPOP conventions so that accelerations and
partials can be compared against those tools directly.
"""
import math
from dataclasses import dataclass

SPEED_OF_LIGHT_M_S: float = 299_792_458.0      # m/s (exact)
AU_METERS: float = 1.49597870691e11            # m — astronomical unit (DE405)
SOLAR_LUMINOSITY_W: float = 3.823e26           # W — STK HPOP value
SOLAR_PRESSURE_1AU_N_M2: float = 4.560e-6      # N/m² — flux pressure at 1 AU

R_SUN: float = 6.96e8                          # m — solar radius
R_EARTH: float = 6_378_137.0                   # m — WGS84 equatorial radius
R_MOON: float = 1.738e6                        # m — mean lunar radius


@dataclass(frozen=True)
class SolarPressureConstants:
    """Swappable constant bundle for the SRP force model.

    speed_of_light_m_s: speed of light (m/s)
    astronomical_unit_m: one astronomical unit (m)
    solar_luminosity_w: total solar luminosity (W)
    solar_pressure_1au_n_m2: radiation pressure at 1 AU (N/m²)
    """
    speed_of_light_m_s: float = SPEED_OF_LIGHT_M_S
    astronomical_unit_m: float = AU_METERS
    solar_luminosity_w: float = SOLAR_LUMINOSITY_W
    solar_pressure_1au_n_m2: float = SOLAR_PRESSURE_1AU_N_M2

    @property
    def luminosity_pressure_1au_n_m2(self) -> float:
        """Pressure at 1 AU implied by the luminosity: L / (4π c AU²)."""
        au = self.astronomical_unit_m
        return self.solar_luminosity_w / (4.0 * math.pi * self.speed_of_light_m_s * au * au)


DEFAULT_CONSTANTS: SolarPressureConstants = SolarPressureConstants()
