# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the conical and cylindrical shadow functions."""
import math

import pytest

from heliopress.domain.errors import DegenerateGeometryError
from heliopress.domain.physical_constants import AU_METERS, R_EARTH, R_MOON, R_SUN
from heliopress.domain.shadow import (
    EclipseType,
    ShadowModel,
    classify_eclipse,
    shadow_fraction,
)


SUN = (AU_METERS, 0.0, 0.0)
LEO = R_EARTH + 600_000.0


# ── Earth, conical ────────────────────────────────────────────────

class TestConicalEarthShadow:

    def test_sunlit_side(self):
        """Satellite between Earth and Sun → full sunlight."""
        assert shadow_fraction((LEO, 0.0, 0.0), SUN) == 1.0
        assert classify_eclipse((LEO, 0.0, 0.0), SUN) == EclipseType.NONE

    def test_behind_earth_on_axis_umbra(self):
        assert shadow_fraction((-LEO, 0.0, 0.0), SUN) == 0.0
        assert classify_eclipse((-LEO, 0.0, 0.0), SUN) == EclipseType.UMBRA

    def test_behind_earth_far_off_axis(self):
        assert shadow_fraction((-LEO, 2.0 * R_EARTH, 0.0), SUN) == 1.0

    def test_penumbra_at_shadow_edge(self):
        """Earth limb grazing the solar disk centre → roughly half the disk visible."""
        frac = shadow_fraction((-LEO, R_EARTH, 0.0), SUN)
        assert 0.3 < frac < 0.7
        assert classify_eclipse((-LEO, R_EARTH, 0.0), SUN) == EclipseType.PENUMBRA

    def test_monotonic_across_penumbra(self):
        """Moving out of the shadow never darkens the spacecraft."""
        previous = 0.0
        for k in range(41):
            y = R_EARTH - 40_000.0 + k * 2_000.0
            frac = shadow_fraction((-LEO, y, 0.0), SUN)
            assert 0.0 <= frac <= 1.0
            assert frac >= previous - 1e-9
            previous = frac
        assert previous == 1.0

    def test_moon_far_off_axis_ignored(self):
        frac = shadow_fraction((LEO, 0.0, 0.0), SUN, moon_position_m=(0.0, 3.84e8, 0.0))
        assert frac == 1.0


# ── Moon as occluder ──────────────────────────────────────────────

class TestLunarShadow:

    def test_annular(self):
        """Beyond the lunar umbra tip, aligned with the Sun → ring of light."""
        sun = (AU_METERS, 5.0e7, 0.0)
        moon = (4.0e8, 5.0e7, 0.0)
        sat = (-1.0e8, 5.0e7, 0.0)
        a = math.asin(R_SUN / (AU_METERS + 1.0e8))
        b = math.asin(R_MOON / 5.0e8)
        frac = shadow_fraction(sat, sun, moon_position_m=moon)
        assert frac == pytest.approx(1.0 - (b * b) / (a * a), rel=1e-9)
        assert classify_eclipse(sat, sun, moon_position_m=moon) == EclipseType.ANNULAR

    def test_lunar_umbra(self):
        sun = (AU_METERS, 5.0e7, 0.0)
        moon = (4.0e8, 5.0e7, 0.0)
        sat = (2.0e8, 5.0e7, 0.0)
        assert shadow_fraction(sat, sun, moon_position_m=moon) == 0.0
        # Without the Moon the same point is lit
        assert shadow_fraction(sat, sun) == 1.0

    def test_darker_occluder_wins(self):
        """Earth umbra wins over an unobstructed view past the Moon."""
        sat = (-LEO, 0.0, 0.0)
        moon = (-4.0e8, 0.0, 0.0)  # behind the spacecraft, irrelevant
        assert shadow_fraction(sat, SUN, moon_position_m=moon) == 0.0


# ── Cylindrical model ─────────────────────────────────────────────

class TestCylindricalShadow:

    def test_inside_cylinder(self):
        frac = shadow_fraction((-LEO, R_EARTH - 1000.0, 0.0), SUN, model=ShadowModel.CYLINDRICAL)
        assert frac == 0.0

    def test_outside_cylinder(self):
        frac = shadow_fraction((-LEO, R_EARTH + 1000.0, 0.0), SUN, model=ShadowModel.CYLINDRICAL)
        assert frac == 1.0

    def test_sunlit_side(self):
        assert shadow_fraction((LEO, 0.0, 0.0), SUN, model=ShadowModel.CYLINDRICAL) == 1.0

    def test_conical_penumbra_where_cylinder_is_dark(self):
        sat = (-LEO, R_EARTH - 1000.0, 0.0)
        conical = shadow_fraction(sat, SUN)
        assert 0.0 < conical < 1.0

    def test_classification_binary(self):
        sat = (-LEO, R_EARTH - 1000.0, 0.0)
        assert classify_eclipse(sat, SUN, model=ShadowModel.CYLINDRICAL) == EclipseType.UMBRA


# ── Degenerate geometry ───────────────────────────────────────────

class TestDegenerateGeometry:

    def test_inside_earth(self):
        with pytest.raises(DegenerateGeometryError):
            shadow_fraction((1000.0, 0.0, 0.0), SUN)

    def test_inside_earth_cylindrical(self):
        with pytest.raises(DegenerateGeometryError):
            shadow_fraction((1000.0, 0.0, 0.0), SUN, model=ShadowModel.CYLINDRICAL)

    def test_inside_moon(self):
        moon = (3.84e8, 0.0, 0.0)
        with pytest.raises(DegenerateGeometryError):
            shadow_fraction((3.84e8 + 10.0, 0.0, 0.0), SUN, moon_position_m=moon)

    def test_radius_override(self):
        """A smaller Earth no longer shadows a point just inside the default cylinder."""
        sat = (-LEO, R_EARTH - 1000.0, 0.0)
        frac = shadow_fraction(sat, SUN, model=ShadowModel.CYLINDRICAL,
                               earth_radius_m=R_EARTH - 10_000.0)
        assert frac == 1.0

    @pytest.mark.parametrize("sat,sun,moon", [
        ((math.nan, 0.0, 0.0), SUN, None),
        ((LEO, 0.0, 0.0), (math.inf, 0.0, 0.0), None),
        ((LEO, 0.0, 0.0), SUN, (math.nan, 0.0, 0.0)),
    ])
    def test_non_finite_vectors(self, sat, sun, moon):
        with pytest.raises(DegenerateGeometryError):
            shadow_fraction(sat, sun, moon_position_m=moon)
        with pytest.raises(DegenerateGeometryError):
            classify_eclipse(sat, sun, moon_position_m=moon, model=ShadowModel.CYLINDRICAL)
