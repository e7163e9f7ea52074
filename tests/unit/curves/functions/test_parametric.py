"""Tests for Kumaraswamy and bias/gain curve factories."""

from __future__ import annotations

import pytest

from easekit.core.curves.functions.parametric import (
    barron_spline,
    bias_gain_function,
    kumaraswamy_function,
)


class TestKumaraswamy:
    """Tests for kumaraswamy_function."""

    @pytest.mark.parametrize(
        ("a", "b"),
        [(0.75, 0.75), (0.5, 0.5), (0.25, 0.25), (2.0, 2.0), (4.0, 4.0), (6.0, 6.0), (1.0, 5.0), (5.0, 1.0)],
    )
    def test_endpoints(self, a: float, b: float) -> None:
        """Every preset starts at 0 and ends at 1."""
        curve = kumaraswamy_function(a, b)
        assert curve(0.0) == 0.0
        assert curve(1.0) == 1.0

    def test_unit_parameters_are_identity(self, unit_grid: list[float]) -> None:
        """a = b = 1 gives the identity."""
        curve = kumaraswamy_function(1.0, 1.0)
        for alpha in unit_grid:
            assert curve(alpha) == pytest.approx(alpha, abs=1e-12)

    def test_mostly_low_and_high_mirror(self, unit_grid: list[float]) -> None:
        """(1, b) and (b, 1) are point reflections of each other."""
        low = kumaraswamy_function(1.0, 5.0)
        high = kumaraswamy_function(5.0, 1.0)
        for alpha in unit_grid:
            assert low(alpha) == pytest.approx(1.0 - high(1.0 - alpha), abs=1e-12)

    def test_bias_direction(self) -> None:
        """(1, 5) stays low, (5, 1) stays high."""
        assert kumaraswamy_function(1.0, 5.0)(0.5) < 0.2
        assert kumaraswamy_function(5.0, 1.0)(0.5) > 0.8

    def test_small_parameters_steepen_middle(self) -> None:
        """Smaller equal parameters give a steeper middle section."""
        steep = kumaraswamy_function(0.5, 0.5)
        flat = kumaraswamy_function(6.0, 6.0)
        slope_steep = steep(0.55) - steep(0.45)
        slope_flat = flat(0.55) - flat(0.45)
        assert slope_steep > slope_flat
        assert slope_flat < 0.1

    def test_zero_parameter_is_permissive(self) -> None:
        """A zero parameter gives IEEE results instead of raising."""
        assert kumaraswamy_function(0.0, 2.0)(0.5) == 0.0


class TestBarronSpline:
    """Tests for barron_spline and bias_gain_function."""

    def test_identity_parameters(self, unit_grid: list[float]) -> None:
        """shape=1, turning=0.5 is approximately the identity."""
        for x in unit_grid:
            assert barron_spline(x, 1.0, 0.5) == pytest.approx(x, abs=1e-12)

    @pytest.mark.parametrize(("shape", "turning"), [(3.0, 0.9), (3.0, 0.1), (0.25, 0.5), (4.0, 0.5)])
    def test_endpoints(self, shape: float, turning: float) -> None:
        """Bias/gain curves start at 0 and end at 1."""
        curve = bias_gain_function(shape, turning)
        assert curve(0.0) == 0.0
        assert curve(1.0) == 1.0

    def test_passes_through_turning_point(self) -> None:
        """The curve crosses the diagonal at the turning point."""
        assert bias_gain_function(3.0, 0.9)(0.9) == pytest.approx(0.9)
        assert bias_gain_function(3.0, 0.1)(0.1) == pytest.approx(0.1)

    def test_large_shape_steepens(self) -> None:
        """shape > 1 flattens the ends around a centered turning point."""
        curve = bias_gain_function(3.0, 0.5)
        assert curve(0.25) == pytest.approx(0.125)
        assert curve(0.75) == pytest.approx(0.875)

    def test_small_shape_flattens_middle(self) -> None:
        """shape < 1 pulls values toward the turning point."""
        curve = bias_gain_function(0.5, 0.5)
        assert curve(0.25) > 0.25
        assert curve(0.75) < 0.75

    def test_zero_shape_is_flat(self) -> None:
        """shape = 0 collapses onto the turning value."""
        assert bias_gain_function(0.0, 0.5)(0.25) == pytest.approx(0.5)
