# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for force-model collaborators.

Time conversion, ephemerides and spacecraft state live outside the force
model. Adapters implement these protocols; the domain only calls them.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from heliopress.domain.ephemeris import CelestialBody
from heliopress.domain.time_systems import AstroTime


@runtime_checkable
class TimeSystem(Protocol):
    """Port for converting UTC epochs to dynamical time."""

    def to_dynamical_time(self, utc_epoch: datetime) -> AstroTime:
        """Return the TT instant matching utc_epoch."""
        ...


@runtime_checkable
class EphemerisProvider(Protocol):
    """Port for Sun/Moon positions in the spacecraft's inertial frame."""

    def position(self, epoch: AstroTime, body: CelestialBody) -> tuple[float, float, float]:
        """Geocentric position of body at a dynamical epoch, in km."""
        ...


@runtime_checkable
class SpacecraftProperties(Protocol):
    """Port for the spacecraft state and physical properties."""

    def position(self) -> tuple[float, float, float]:
        """Inertial position (m)."""
        ...

    def cross_sectional_area(self) -> float:
        """Area exposed to radiation (m²)."""
        ...

    def dry_mass(self) -> float:
        """Mass (kg)."""
        ...

    def reflect_coeff(self) -> float:
        """Dimensionless reflectivity coefficient."""
        ...


@runtime_checkable
class ForceModel(Protocol):
    """Structural typing port for pluggable force models in a propagator."""

    def acceleration(
        self,
        epoch: datetime,
        position: tuple[float, float, float],
        velocity: tuple[float, float, float],
    ) -> tuple[float, float, float]: ...
