# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Solar radiation pressure force model with variational partials.

Cannonball model with conical Earth/Moon shadow. Each evaluation returns
the acceleration together with the partials an orbit-determination filter
needs:

    a        = Cr (A/m) L_sun / (4π c |d|³) · ν · d,   d = r_sat − r_sun
    ∂a/∂r    = Cr (A/m) P_sun AU² (I/|d|³ − 3 d dᵀ/|d|⁵)
    ∂a/∂v    = 0
    ∂a/∂Cr   = a / Cr

The acceleration uses the luminosity form of the flux (STK HPOP), the
position partial the pressure-at-1-AU form (Montenbruck & Gill p. 248,
same structure as a point-mass attraction). The two scale factors differ
by about 0.6 %.

Known approximation: the shadow fraction ν is left out of ∂a/∂r. The
umbra/penumbra boundary is not differentiable, so the linearization is
that of a fully lit spacecraft.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from heliopress.domain.ephemeris import AnalyticalEphemeris, CelestialBody
from heliopress.domain.errors import (
    DegenerateGeometryError,
    InvalidPhysicalPropertyError,
)
from heliopress.domain.physical_constants import (
    DEFAULT_CONSTANTS,
    SolarPressureConstants,
)
from heliopress.domain.shadow import ShadowModel, shadow_fraction
from heliopress.domain.spacecraft import finite_position, validate_physical_properties
from heliopress.domain.time_systems import UtcToTtConverter
from heliopress.ports import EphemerisProvider, SpacecraftProperties, TimeSystem

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

_ZERO_MAT3: Mat3 = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


# --- Types ---

@dataclass(frozen=True)
class SolarRadiationPressureConfig:
    """Configuration of the SRP force model.

    constants: physical constants bundle
    shadow_model: eclipse geometry used for the illumination fraction
    min_sun_distance_m: spacecraft-Sun separations at or below this are degenerate
    """
    constants: SolarPressureConstants = DEFAULT_CONSTANTS
    shadow_model: ShadowModel = ShadowModel.CONICAL
    min_sun_distance_m: float = 1.0


@dataclass(frozen=True)
class ForceModelResult:
    """Acceleration and partials from a single force-model evaluation."""
    acceleration: Vec3                 # m/s²
    da_dr: Mat3                        # 1/s²
    da_dv: Mat3                        # 1/s
    da_dcr: Vec3                       # m/s² per unit Cr
    shadow_fraction: float = 1.0

    def jacobian(self) -> np.ndarray:
        """3x7 block [∂a/∂r | ∂a/∂v | ∂a/∂Cr] for variational equations."""
        return np.hstack([
            np.array(self.da_dr),
            np.array(self.da_dv),
            np.array(self.da_dcr).reshape(3, 1),
        ])


# --- Core computation ---

def _sun_relative_geometry(
    spacecraft_position_m: Vec3,
    sun_position_m: Vec3,
    min_sun_distance_m: float,
) -> tuple[np.ndarray, float]:
    """Vector from the Sun to the spacecraft and its length."""
    d = (finite_position("spacecraft_position_m", spacecraft_position_m)
         - finite_position("sun_position_m", sun_position_m))
    dmag = float(np.linalg.norm(d))
    if not dmag > min_sun_distance_m:
        logger.warning(
            "Degenerate SRP geometry: spacecraft-Sun distance %.6g m", dmag,
        )
        raise DegenerateGeometryError(
            f"spacecraft-Sun distance {dmag} m is below {min_sun_distance_m} m")
    return d, dmag


def compute_srp_acceleration(
    sun_position_m: Vec3,
    moon_position_m: Vec3 | None,
    spacecraft_position_m: Vec3,
    cross_area_m2: float,
    dry_mass_kg: float,
    reflect_coeff: float,
    config: SolarRadiationPressureConfig = SolarRadiationPressureConfig(),
) -> tuple[Vec3, float]:
    """SRP acceleration alone, with the shadow fraction used.

    Cr = 0 or A = 0 gives the exact zero vector.

    Returns:
        (acceleration m/s², shadow fraction)
    """
    validate_physical_properties(cross_area_m2, dry_mass_kg, reflect_coeff)
    d, dmag = _sun_relative_geometry(
        spacecraft_position_m, sun_position_m, config.min_sun_distance_m,
    )
    a, lam = _acceleration(
        d, dmag, sun_position_m, moon_position_m, spacecraft_position_m,
        cross_area_m2, dry_mass_kg, reflect_coeff, config,
    )
    return (float(a[0]), float(a[1]), float(a[2])), lam


def _acceleration(
    d: np.ndarray,
    dmag: float,
    sun_position_m: Vec3,
    moon_position_m: Vec3 | None,
    spacecraft_position_m: Vec3,
    cross_area_m2: float,
    dry_mass_kg: float,
    reflect_coeff: float,
    config: SolarRadiationPressureConfig,
) -> tuple[np.ndarray, float]:
    c = config.constants
    dcubed = dmag * dmag * dmag
    factor = (reflect_coeff * (cross_area_m2 / dry_mass_kg) * c.solar_luminosity_w
              / (4.0 * math.pi * c.speed_of_light_m_s * dcubed))

    lam = shadow_fraction(
        spacecraft_position_m, sun_position_m, moon_position_m,
        model=config.shadow_model,
    )
    if lam < 1.0:
        logger.debug("Spacecraft in shadow, illumination fraction %.4f", lam)

    return d * factor * lam, lam


def compute_solar_radiation_pressure(
    sun_position_m: Vec3,
    moon_position_m: Vec3 | None,
    spacecraft_position_m: Vec3,
    cross_area_m2: float,
    dry_mass_kg: float,
    reflect_coeff: float,
    config: SolarRadiationPressureConfig = SolarRadiationPressureConfig(),
) -> ForceModelResult:
    """Acceleration and partials for already-resolved inputs.

    Args:
        sun_position_m: Geocentric inertial Sun position (m).
        moon_position_m: Geocentric inertial Moon position (m), or None.
        spacecraft_position_m: Geocentric inertial spacecraft position (m).
        cross_area_m2: Cross-sectional area exposed to radiation (m²).
        dry_mass_kg: Spacecraft mass (kg).
        reflect_coeff: Reflectivity coefficient Cr (> 0).
        config: Constants, shadow model and degeneracy tolerance.

    Returns:
        ForceModelResult.

    Raises:
        InvalidPhysicalPropertyError: mass <= 0, area < 0, or Cr <= 0
            (∂a/∂Cr is undefined at Cr = 0).
        DegenerateGeometryError: spacecraft at the Sun or inside an occluder,
            or a non-finite position component.
    """
    validate_physical_properties(cross_area_m2, dry_mass_kg, reflect_coeff)
    if reflect_coeff == 0.0:
        raise InvalidPhysicalPropertyError(
            "reflect_coeff is zero; acceleration partial w.r.t. Cr is undefined")

    d, dmag = _sun_relative_geometry(
        spacecraft_position_m, sun_position_m, config.min_sun_distance_m,
    )
    a, lam = _acceleration(
        d, dmag, sun_position_m, moon_position_m, spacecraft_position_m,
        cross_area_m2, dry_mass_kg, reflect_coeff, config,
    )

    # da/dr: same form as the gravitational attraction of the Sun
    c = config.constants
    dcubed = dmag * dmag * dmag
    au2 = c.astronomical_unit_m * c.astronomical_unit_m
    factor2 = -1.0 * reflect_coeff * (cross_area_m2 / dry_mass_kg) * c.solar_pressure_1au_n_m2 * au2
    muod3 = factor2 / dcubed
    jk = 3.0 * muod3 / dmag / dmag

    da_dr = jk * np.outer(d, d) - muod3 * np.eye(3)

    da_dcr = a / reflect_coeff

    return ForceModelResult(
        acceleration=(float(a[0]), float(a[1]), float(a[2])),
        da_dr=tuple(tuple(float(v) for v in row) for row in da_dr),
        da_dv=_ZERO_MAT3,
        da_dcr=(float(da_dcr[0]), float(da_dcr[1]), float(da_dcr[2])),
        shadow_fraction=lam,
    )


# --- Force model with collaborators ---

class SolarRadiationPressure:
    """SRP force model wired to time-system and ephemeris collaborators.

    Stateless: every call converts the epoch, queries the ephemeris once per
    body and returns a fresh ForceModelResult.
    """

    name: str = "SimplePressure"

    def __init__(
        self,
        ephemeris: EphemerisProvider | None = None,
        time_system: TimeSystem | None = None,
        config: SolarRadiationPressureConfig = SolarRadiationPressureConfig(),
    ) -> None:
        self._ephemeris = ephemeris if ephemeris is not None else AnalyticalEphemeris()
        self._time_system = time_system if time_system is not None else UtcToTtConverter()
        self._config = config

    @property
    def config(self) -> SolarRadiationPressureConfig:
        return self._config

    def sun_and_moon_m(self, utc_epoch: datetime) -> tuple[Vec3, Vec3]:
        """Sun and Moon positions (m) at the TT instant of utc_epoch."""
        tt = self._time_system.to_dynamical_time(utc_epoch)
        sun_km = self._ephemeris.position(tt, CelestialBody.SUN)
        moon_km = self._ephemeris.position(tt, CelestialBody.MOON)
        sun_m = (sun_km[0] * 1000.0, sun_km[1] * 1000.0, sun_km[2] * 1000.0)
        moon_m = (moon_km[0] * 1000.0, moon_km[1] * 1000.0, moon_km[2] * 1000.0)
        return sun_m, moon_m

    def evaluate(
        self,
        utc_epoch: datetime,
        spacecraft: SpacecraftProperties,
    ) -> ForceModelResult:
        """Acceleration and partials for spacecraft at utc_epoch."""
        sun_m, moon_m = self.sun_and_moon_m(utc_epoch)
        result = compute_solar_radiation_pressure(
            sun_m,
            moon_m,
            tuple(spacecraft.position()),
            spacecraft.cross_sectional_area(),
            spacecraft.dry_mass(),
            spacecraft.reflect_coeff(),
            config=self._config,
        )
        logger.debug(
            "SRP at %s: |a|=%.6e m/s², shadow=%.3f",
            utc_epoch.isoformat(),
            float(np.linalg.norm(result.acceleration)),
            result.shadow_fraction,
        )
        return result


class SolarRadiationPressureForce:
    """Propagator-facing SRP force with fixed spacecraft properties.

    Satisfies the ForceModel port: only the acceleration is returned,
    so Cr = 0 is allowed and yields zero.
    """

    def __init__(
        self,
        cr: float,
        area_m2: float,
        mass_kg: float,
        model: SolarRadiationPressure | None = None,
    ) -> None:
        validate_physical_properties(area_m2, mass_kg, cr)
        self._cr = cr
        self._area_m2 = area_m2
        self._mass_kg = mass_kg
        self._model = model if model is not None else SolarRadiationPressure()

    def acceleration(
        self,
        epoch: datetime,
        position: Vec3,
        velocity: Vec3,
    ) -> Vec3:
        sun_m, moon_m = self._model.sun_and_moon_m(epoch)
        acc, _ = compute_srp_acceleration(
            sun_m, moon_m, position,
            self._area_m2, self._mass_kg, self._cr,
            config=self._model.config,
        )
        return acc
