# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
heliopress

Solar radiation pressure force model for numerical orbit propagation and
orbit determination: acceleration, partials with respect to position,
velocity and reflectivity coefficient, and conical/cylindrical shadow
functions with Earth and Moon occultation.
"""

from heliopress.domain.physical_constants import (
    AU_METERS,
    DEFAULT_CONSTANTS,
    R_EARTH,
    R_MOON,
    R_SUN,
    SOLAR_LUMINOSITY_W,
    SOLAR_PRESSURE_1AU_N_M2,
    SPEED_OF_LIGHT_M_S,
    SolarPressureConstants,
)
from heliopress.domain.errors import (
    DegenerateGeometryError,
    InvalidPhysicalPropertyError,
)
from heliopress.domain.time_systems import (
    AstroTime,
    UtcToTtConverter,
    utc_to_tai_seconds,
)
from heliopress.domain.solar import SunPosition, sun_position_eci
from heliopress.domain.lunar import MoonPosition, moon_position_eci
from heliopress.domain.ephemeris import AnalyticalEphemeris, CelestialBody
from heliopress.domain.spacecraft import Spacecraft
from heliopress.domain.shadow import (
    EclipseType,
    ShadowModel,
    classify_eclipse,
    shadow_fraction,
)
from heliopress.domain.solar_radiation_pressure import (
    ForceModelResult,
    SolarRadiationPressure,
    SolarRadiationPressureConfig,
    SolarRadiationPressureForce,
    compute_solar_radiation_pressure,
    compute_srp_acceleration,
)
from heliopress.domain.sensitivity import (
    numerical_position_jacobian,
    relative_jacobian_error,
)

__all__ = [
    "AU_METERS",
    "DEFAULT_CONSTANTS",
    "R_EARTH",
    "R_MOON",
    "R_SUN",
    "SOLAR_LUMINOSITY_W",
    "SOLAR_PRESSURE_1AU_N_M2",
    "SPEED_OF_LIGHT_M_S",
    "SolarPressureConstants",
    "DegenerateGeometryError",
    "InvalidPhysicalPropertyError",
    "AstroTime",
    "UtcToTtConverter",
    "utc_to_tai_seconds",
    "SunPosition",
    "sun_position_eci",
    "MoonPosition",
    "moon_position_eci",
    "AnalyticalEphemeris",
    "CelestialBody",
    "Spacecraft",
    "EclipseType",
    "ShadowModel",
    "classify_eclipse",
    "shadow_fraction",
    "ForceModelResult",
    "SolarRadiationPressure",
    "SolarRadiationPressureConfig",
    "SolarRadiationPressureForce",
    "compute_solar_radiation_pressure",
    "compute_srp_acceleration",
    "numerical_position_jacobian",
    "relative_jacobian_error",
]
