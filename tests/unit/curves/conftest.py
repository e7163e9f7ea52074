"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from easekit.core.curves.library import build_default_registry, build_tween_registry
from easekit.core.curves.models import CurvePoint
from easekit.core.curves.registry import CurveRegistry


@pytest.fixture
def empty_registry() -> CurveRegistry:
    """Create a registry with no curves."""
    return CurveRegistry()


@pytest.fixture(scope="module")
def interpolations() -> CurveRegistry:
    """The interpolation catalogue (read-only in tests)."""
    return build_default_registry()


@pytest.fixture(scope="module")
def tween_equations() -> CurveRegistry:
    """The tween-equation catalogue (read-only in tests)."""
    return build_tween_registry()


@pytest.fixture
def unit_grid() -> list[float]:
    """101 evenly spaced alphas over [0, 1]."""
    return [i / 100 for i in range(101)]


@pytest.fixture
def ramp_up_points() -> list[CurvePoint]:
    """Create linear ramp from 0 to 1."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=0.5),
        CurvePoint(t=1.0, v=1.0),
    ]


@pytest.fixture
def overshoot_points() -> list[CurvePoint]:
    """Create points that rise above 1 before settling."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=1.2),
        CurvePoint(t=1.0, v=1.0),
    ]
