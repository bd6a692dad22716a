# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Spacecraft state and physical properties read by force models."""
import math
from dataclasses import dataclass

import numpy as np

from heliopress.domain.errors import (
    DegenerateGeometryError,
    InvalidPhysicalPropertyError,
)


@dataclass(frozen=True)
class Spacecraft:
    """Immutable spacecraft snapshot.

    position_m: inertial position (m)
    velocity_m_s: inertial velocity (m/s)
    cross_sectional_area_m2: area exposed to sunlight (m²)
    dry_mass_kg: mass (kg)
    reflect_coeff_cr: dimensionless Cr, typically 1.0-2.0
    """
    position_m: tuple[float, float, float]
    velocity_m_s: tuple[float, float, float] = (0.0, 0.0, 0.0)
    cross_sectional_area_m2: float = 0.0
    dry_mass_kg: float = 1.0
    reflect_coeff_cr: float = 1.0

    def __post_init__(self) -> None:
        if len(self.position_m) != 3 or len(self.velocity_m_s) != 3:
            raise ValueError("position_m and velocity_m_s must have 3 components")
        validate_physical_properties(
            self.cross_sectional_area_m2,
            self.dry_mass_kg,
            self.reflect_coeff_cr,
        )

    @property
    def area_to_mass_ratio(self) -> float:
        """A/m (m²/kg)."""
        return self.cross_sectional_area_m2 / self.dry_mass_kg

    def position(self) -> tuple[float, float, float]:
        return self.position_m

    def velocity(self) -> tuple[float, float, float]:
        return self.velocity_m_s

    def cross_sectional_area(self) -> float:
        return self.cross_sectional_area_m2

    def dry_mass(self) -> float:
        return self.dry_mass_kg

    def reflect_coeff(self) -> float:
        return self.reflect_coeff_cr


def validate_physical_properties(
    cross_area_m2: float,
    dry_mass_kg: float,
    reflect_coeff: float,
) -> None:
    """Raise InvalidPhysicalPropertyError if any property is out of domain.

    Zero area and zero reflectivity are allowed here: they give a zero
    acceleration. Whether Cr = 0 is acceptable depends on the caller.
    """
    if not math.isfinite(dry_mass_kg) or dry_mass_kg <= 0:
        raise InvalidPhysicalPropertyError(
            f"dry_mass_kg must be positive, got {dry_mass_kg}")
    if not math.isfinite(cross_area_m2) or cross_area_m2 < 0:
        raise InvalidPhysicalPropertyError(
            f"cross_area_m2 must be non-negative, got {cross_area_m2}")
    if not math.isfinite(reflect_coeff) or reflect_coeff < 0:
        raise InvalidPhysicalPropertyError(
            f"reflect_coeff must be non-negative, got {reflect_coeff}")


def finite_position(name: str, vector) -> np.ndarray:
    """Position vector as a float array, rejecting inf/NaN components.

    Raises:
        DegenerateGeometryError: a component is not finite.
    """
    arr = np.array(vector, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise DegenerateGeometryError(f"{name} has non-finite components: {tuple(vector)}")
    return arr
