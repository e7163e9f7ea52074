"""Basic curve functions: linear, smoothstep family, sine and circle.

None of these take parameters, so they are plain functions rather than
factories. All of them map [0, 1] into [0, 1].
"""

import math

from easekit.core.curves.transforms import compose


def linear(alpha: float) -> float:
    """Identity curve; returns alpha."""
    return alpha


def smooth(alpha: float) -> float:
    """Cubic Hermite spline ("smoothstep").

    The textbook form ``a * a * (3 - 2 * a)`` can round to slightly above 1
    for inputs just below 1. The equivalent ``a * a * (1 - a - a + 2)`` stays
    within [0, 1].
    """
    return alpha * alpha * (1 - alpha - alpha + 2)


smooth2 = compose(smooth, smooth)
"""Smoothstep applied twice, for a steeper middle."""


def smoother(alpha: float) -> float:
    """Quintic Hermite spline by Ken Perlin ("smootherstep" / "fade").

    The last coefficient is 9.999998 rather than 10; with 10 the sum rounds
    above 1 for many inputs just below 1 (0.99999994 among them).
    """
    return alpha * alpha * alpha * (alpha * (alpha * 6.0 - 15.0) + 9.999998)


def _sin_deg(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos_deg(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def sine(alpha: float) -> float:
    """Squared quarter sine; eases at both ends."""
    s = _sin_deg(alpha * 90.0)
    return s * s


def sine_in(alpha: float) -> float:
    """Quarter cosine rise; starts slow."""
    return 1.0 - _cos_deg(alpha * 90.0)


def sine_out(alpha: float) -> float:
    """Quarter sine; ends slow."""
    return _sin_deg(alpha * 90.0)


def circle(alpha: float) -> float:
    """Two circular arcs joined at the midpoint."""
    if alpha <= 0.5:
        return (1.0 - math.sqrt(1.0 - alpha * alpha * 4.0)) * 0.5
    # rounding can push the radicand just below zero right after the midpoint
    return (math.sqrt(max(0.0, 1.0 - 4.0 * (alpha * (alpha - 2.0) + 1.0))) + 1.0) * 0.5


def circle_in(alpha: float) -> float:
    """Quarter circle, concave up."""
    return 1.0 - math.sqrt(1.0 - alpha * alpha)


def circle_out(alpha: float) -> float:
    """Quarter circle, concave down."""
    return math.sqrt(alpha * (2.0 - alpha))


fade = smoother
