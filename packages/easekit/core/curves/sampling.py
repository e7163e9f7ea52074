"""Curve sampling infrastructure.

This module provides functions for sampling curves at uniform intervals
and for linear interpolation between sampled points.
"""

import numpy as np

from easekit.core.curves.models import CurvePoint
from easekit.core.curves.protocols import CurveFunction
from easekit.core.curves.transforms import interpolate


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples over the closed interval [0, 1].

    Both endpoints are included so sampled curves show their exact start
    and end values.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values, first 0.0 and last 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return np.linspace(0.0, 1.0, n).tolist()


def sample_curve(
    curve: CurveFunction, n: int, start: float = 0.0, end: float = 1.0
) -> list[CurvePoint]:
    """Sample a curve on a uniform grid.

    Args:
        curve: Curve function or TaggedCurve.
        n: Number of samples, >= 2.
        start: Output value for a curve result of 0.
        end: Output value for a curve result of 1.

    Returns:
        Points ``(t, start + curve(t) * (end - start))``.

    Raises:
        ValueError: If n < 2, or a sampled value is not finite.
    """
    return [CurvePoint(t=t, v=interpolate(curve, start, end, t)) for t in sample_uniform_grid(n)]


def interpolate_samples(points: list[CurvePoint], t: float) -> float:
    """Linearly interpolate a value at time t from sampled points.

    If t is before the first point, returns the first point's value.
    If t is after the last point, returns the last point's value.

    Args:
        points: CurvePoints with non-decreasing t values.
        t: Time value in [0, 1].

    Returns:
        Interpolated value at time t.

    Raises:
        ValueError: If points is empty or t is outside [0, 1].
    """
    if not points:
        raise ValueError("points cannot be empty")
    if not (0.0 <= t <= 1.0):
        raise ValueError(f"t must be in [0, 1], got {t}")

    if t <= points[0].t:
        return points[0].v
    if t >= points[-1].t:
        return points[-1].v

    times = [p.t for p in points]
    values = [p.v for p in points]
    return float(np.interp(t, times, values))
