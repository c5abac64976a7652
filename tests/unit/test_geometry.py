"""Unit tests for geometry helpers and the absorption rule."""

import math

import numpy as np
import pytest

from cellsim.core.geometry import (
    absorbed_radii,
    angle_between,
    distance,
    normalize_radians,
)


class TestNormalizeRadians:
    """Tests for angle wrapping into (-π, π]."""

    @pytest.mark.parametrize(
        "theta",
        [0.0, 1.0, -1.0, math.pi, -math.pi, 3 * math.pi, -3 * math.pi,
         7.5, -7.5, 1e6, -1e6, 2 * math.pi, -2 * math.pi, 1e-20, -1e-20],
    )
    def test_range(self, theta):
        result = normalize_radians(theta)
        assert -math.pi < result <= math.pi

    def test_pi_boundaries(self):
        assert normalize_radians(math.pi) == math.pi
        assert normalize_radians(-math.pi) == pytest.approx(math.pi)

    def test_wraps_full_turns(self):
        assert normalize_radians(0.5 + 2 * math.pi) == pytest.approx(0.5)
        assert normalize_radians(0.5 - 4 * math.pi) == pytest.approx(0.5)
        assert normalize_radians(3 * math.pi / 2) == pytest.approx(-math.pi / 2)

    def test_in_range_unchanged(self):
        for theta in [0.0, 0.1, -0.1, 3.0, -3.0]:
            assert normalize_radians(theta) == theta

    def test_idempotent(self, rng):
        for theta in rng.uniform(-100, 100, size=200):
            once = normalize_radians(float(theta))
            assert normalize_radians(once) == once

    def test_preserves_direction(self, rng):
        for theta in rng.uniform(-50, 50, size=50):
            wrapped = normalize_radians(float(theta))
            assert math.cos(wrapped) == pytest.approx(math.cos(theta), abs=1e-9)
            assert math.sin(wrapped) == pytest.approx(math.sin(theta), abs=1e-9)


class TestDistanceAndAngle:
    """Tests for distance and angle_between."""

    def test_distance(self):
        assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0
        assert distance((1.0, 1.0), (1.0, 1.0)) == 0.0

    def test_angle_axes(self):
        assert angle_between((0.0, 0.0), (1.0, 0.0)) == 0.0
        assert angle_between((0.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)
        assert angle_between((0.0, 0.0), (-1.0, 0.0)) == pytest.approx(math.pi)
        assert angle_between((0.0, 0.0), (0.0, -1.0)) == pytest.approx(-math.pi / 2)

    def test_angle_of_zero_vector_is_zero(self):
        angle = angle_between((5.0, 5.0), (5.0, 5.0))
        assert angle == 0.0
        assert not math.isnan(angle)


class TestAbsorbedRadii:
    """Tests for the area-conserving absorption rule."""

    def test_full_absorption_scenario(self):
        # r=4 absorbs r=3 at d=5: a=25, new radius (5 + 5) / 2 = 5
        new_large, new_small = absorbed_radii(5.0, 4.0, 3.0)
        assert new_large == pytest.approx(5.0)
        assert new_small == pytest.approx(0.0)

    def test_tangent_circles_unchanged(self):
        # d = r1 + r2: the formula returns the original radii
        new_large, new_small = absorbed_radii(2.0, 1.0, 1.0)
        assert new_large == pytest.approx(1.0)
        assert new_small == pytest.approx(1.0)

    def test_partial_absorption(self):
        d, r1, r2 = 9.0, 6.0, 4.0
        new_large, new_small = absorbed_radii(d, r1, r2)
        a = r1 ** 2 + r2 ** 2
        assert new_large == pytest.approx((d + math.sqrt(2 * a - d ** 2)) / 2)
        assert new_large + new_small == pytest.approx(d)
        assert new_large ** 2 + new_small ** 2 == pytest.approx(a)

    def test_deep_overlap_uses_formula(self):
        # d=1, a=25: (1 + √49) / 2 = 4, and 1 - 4 < 0 is clamped
        new_large, new_small = absorbed_radii(1.0, 4.0, 3.0)
        assert new_large == pytest.approx(4.0)
        assert new_small == 0.0

    def test_deep_overlap_between_regimes(self):
        new_large, new_small = absorbed_radii(4.0, 4.0, 3.0)
        assert new_large == pytest.approx((4.0 + math.sqrt(34.0)) / 2)
        assert new_small == 0.0

    def test_coincident_centers(self):
        # d=0: √(2a) / 2 = √12.5
        new_large, new_small = absorbed_radii(0.0, 4.0, 3.0)
        assert new_large == pytest.approx(math.sqrt(12.5))
        assert new_small == 0.0

    def test_full_absorption_never_creates_area(self, rng):
        for _ in range(500):
            r1, r2 = (float(r) for r in rng.uniform(0.1, 20.0, size=2))
            d = float(rng.uniform(0.0, math.sqrt(r1 ** 2 + r2 ** 2)))
            new_large, new_small = absorbed_radii(d, r1, r2)
            assert new_small == 0.0
            assert new_large ** 2 <= r1 ** 2 + r2 ** 2 + 1e-9

    def test_properties_over_random_overlaps(self, rng):
        for _ in range(500):
            r1, r2 = rng.uniform(0.0, 20.0, size=2)
            d = float(rng.uniform(0.0, r1 + r2))
            new_large, new_small = absorbed_radii(d, float(r1), float(r2))

            assert new_large >= 0.0
            assert new_small >= 0.0
            assert new_large == pytest.approx((d + math.sqrt(max(0.0, 2 * (r1 ** 2 + r2 ** 2) - d ** 2))) / 2)

            # The absorbed cell survives: area is conserved, circles end up tangent
            if d ** 2 >= r1 ** 2 + r2 ** 2:
                assert new_large >= max(r1, r2) - 1e-9
                assert new_large ** 2 + new_small ** 2 == pytest.approx(r1 ** 2 + r2 ** 2)
                assert new_large + new_small == pytest.approx(d)

    def test_equal_radii_at_contact_never_negative(self):
        # Rounding at d == r1 + r2 with r1 == r2 must not produce NaN
        for r in np.linspace(0.1, 50.0, 100):
            new_large, new_small = absorbed_radii(2 * r, float(r), float(r))
            assert not math.isnan(new_large)
            assert new_large == pytest.approx(r)
            assert new_small == pytest.approx(r)
