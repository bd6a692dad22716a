# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the Spacecraft value object."""
import pytest

from heliopress.domain.errors import (
    DegenerateGeometryError,
    InvalidPhysicalPropertyError,
)
from heliopress.domain.spacecraft import (
    Spacecraft,
    finite_position,
    validate_physical_properties,
)
from heliopress.ports import SpacecraftProperties


class TestSpacecraft:

    def test_accessors(self):
        sc = Spacecraft(
            position_m=(7.0e6, 0.0, 0.0),
            velocity_m_s=(0.0, 7.5e3, 0.0),
            cross_sectional_area_m2=10.0,
            dry_mass_kg=1000.0,
            reflect_coeff_cr=1.5,
        )
        assert sc.position() == (7.0e6, 0.0, 0.0)
        assert sc.velocity() == (0.0, 7.5e3, 0.0)
        assert sc.cross_sectional_area() == 10.0
        assert sc.dry_mass() == 1000.0
        assert sc.reflect_coeff() == 1.5
        assert sc.area_to_mass_ratio == pytest.approx(0.01)

    def test_satisfies_port(self):
        assert isinstance(Spacecraft((7.0e6, 0.0, 0.0)), SpacecraftProperties)

    def test_frozen(self):
        sc = Spacecraft((7.0e6, 0.0, 0.0))
        with pytest.raises(AttributeError):
            sc.dry_mass_kg = 2.0

    def test_rejects_zero_mass(self):
        with pytest.raises(InvalidPhysicalPropertyError):
            Spacecraft((7.0e6, 0.0, 0.0), dry_mass_kg=0.0)

    def test_rejects_bad_vector(self):
        with pytest.raises(ValueError):
            Spacecraft((7.0e6, 0.0))


class TestValidatePhysicalProperties:

    def test_zero_area_and_cr_allowed(self):
        validate_physical_properties(0.0, 100.0, 0.0)

    @pytest.mark.parametrize("area,mass,cr", [
        (-1.0, 100.0, 1.0),
        (1.0, -100.0, 1.0),
        (1.0, 100.0, -0.5),
        (float("inf"), 100.0, 1.0),
        (1.0, 100.0, float("nan")),
    ])
    def test_rejects(self, area, mass, cr):
        with pytest.raises(InvalidPhysicalPropertyError):
            validate_physical_properties(area, mass, cr)


class TestFinitePosition:

    def test_returns_float_array(self):
        arr = finite_position("r", (1, 2, 3))
        assert arr.dtype == float
        assert arr.tolist() == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("vec", [
        (float("inf"), 0.0, 0.0),
        (0.0, float("-inf"), 0.0),
        (0.0, 0.0, float("nan")),
    ])
    def test_rejects_non_finite(self, vec):
        with pytest.raises(DegenerateGeometryError, match="r_sat"):
            finite_position("r_sat", vec)

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            finite_position("r_sat", (1.0, 2.0))
