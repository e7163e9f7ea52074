"""Easing curve factories: power, exponential and swing families.

Each factory is a pure function of its parameters and returns a closure.
Parameters are not validated; out-of-domain values (negative powers,
``value <= 1`` for the exponential family) flow through the formulas and
can produce inf or nan.

The returned functions are only well-behaved for alpha in [0, 1]; wrap
them in a TaggedCurve to get input clamping.
"""

from __future__ import annotations

import math

from easekit.core.curves.protocols import CurveFunction
from easekit.core.utils.math import ieee_div, ieee_pow

# ---------------------------------------------------------------------------
# Power
# ---------------------------------------------------------------------------


def pow_function(power: float) -> CurveFunction:
    """Accelerate then decelerate (INOUT) with the given power.

    When power is greater than 1 this starts slowly, speeds up in the middle
    and slows down at the end. Non-integer powers are supported.

    Args:
        power: Exponent, expected >= 0.

    Returns:
        Curve function.

    Example:
        >>> quad = pow_function(2.0)
        >>> quad(0.25), quad(0.75)
        (0.125, 0.875)
    """

    def curve(alpha: float) -> float:
        if alpha <= 0.5:
            return ieee_pow(alpha + alpha, power) * 0.5
        return ieee_pow(2.0 - alpha - alpha, power) * -0.5 + 1.0

    return curve


def pow_out_in_function(power: float) -> CurveFunction:
    """Decelerate then accelerate (OUTIN) with the given power.

    Closed form rather than ``flip(pow_function(power))``; the two agree.
    """

    def curve(alpha: float) -> float:
        if alpha > 0.5:
            return ieee_pow(alpha + alpha - 1.0, power) * 0.5 + 0.5
        return ieee_pow(1.0 - alpha - alpha, power) * -0.5 + 0.5

    return curve


def pow_in_function(power: float) -> CurveFunction:
    """Accelerate (IN): ``alpha ** power``."""

    def curve(alpha: float) -> float:
        return ieee_pow(alpha, power)

    return curve


def pow_out_function(power: float) -> CurveFunction:
    """Decelerate (OUT): ``1 - (1 - alpha) ** power``."""

    def curve(alpha: float) -> float:
        return 1.0 - ieee_pow(1.0 - alpha, power)

    return curve


def sqrt_inout(alpha: float) -> float:
    """``pow_function(0.5)`` using math.sqrt."""
    if alpha <= 0.5:
        return math.sqrt(alpha + alpha) * 0.5
    return math.sqrt(2.0 - alpha - alpha) * -0.5 + 1.0


def sqrt_in(alpha: float) -> float:
    """Inverse of ``pow_in_function(2)``."""
    return math.sqrt(alpha)


def sqrt_out(alpha: float) -> float:
    """Inverse of ``pow_out_function(2)``."""
    return 1.0 - math.sqrt(1.0 - alpha)


def cbrt_in(alpha: float) -> float:
    """Inverse of ``pow_in_function(3)``."""
    return math.cbrt(alpha)


def cbrt_out(alpha: float) -> float:
    """Inverse of ``pow_out_function(3)``."""
    return 1.0 - math.cbrt(1.0 - alpha)


# ---------------------------------------------------------------------------
# Exponential
# ---------------------------------------------------------------------------


def _exp_bounds(value: float, power: float) -> tuple[float, float]:
    # min is the raw curve value at alpha=0; scale stretches [min, 1] onto [0, 1]
    minimum = ieee_pow(value, -power)
    return minimum, ieee_div(1.0, 1.0 - minimum)


def exp_function(value: float, power: float) -> CurveFunction:
    """Exponential ease in and out (INOUT), normalized to hit 0 and 1 exactly.

    Args:
        value: Base of the exponential, expected > 1 (2 is typical).
        power: Steepness, expected > 0 (5 and 10 are typical).
    """
    minimum, scale = _exp_bounds(value, power)

    def curve(alpha: float) -> float:
        if alpha <= 0.5:
            return (ieee_pow(value, power * (alpha * 2.0 - 1.0)) - minimum) * scale * 0.5
        return (2.0 - (ieee_pow(value, -power * (alpha * 2.0 - 1.0)) - minimum) * scale) * 0.5

    return curve


def exp_in_function(value: float, power: float) -> CurveFunction:
    """Exponential ease in (IN)."""
    minimum, scale = _exp_bounds(value, power)

    def curve(alpha: float) -> float:
        return (ieee_pow(value, power * (alpha - 1.0)) - minimum) * scale

    return curve


def exp_out_function(value: float, power: float) -> CurveFunction:
    """Exponential ease out (OUT)."""
    minimum, scale = _exp_bounds(value, power)

    def curve(alpha: float) -> float:
        return 1.0 - (ieee_pow(value, -power * alpha) - minimum) * scale

    return curve


# ---------------------------------------------------------------------------
# Swing ("back")
# ---------------------------------------------------------------------------


def swing_function(scale: float) -> CurveFunction:
    """Overshoot below 0 near the start and above 1 near the end (INOUT).

    Args:
        scale: Overshoot strength, expected >= 0. Zero gives a plain cubic.
    """
    sc = scale + scale

    def curve(alpha: float) -> float:
        if alpha <= 0.5:
            a = alpha + alpha
            return ((sc + 1.0) * a - sc) * a * a * 0.5
        a = alpha + alpha - 2.0
        return ((sc + 1.0) * a + sc) * a * a * 0.5 + 1.0

    return curve


def swing_out_function(scale: float) -> CurveFunction:
    """Overshoot above 1 before settling (OUT)."""

    def curve(alpha: float) -> float:
        a = alpha - 1.0
        return ((scale + 1.0) * a + scale) * a * a + 1.0

    return curve


def swing_in_function(scale: float) -> CurveFunction:
    """Dip below 0 before rising (IN)."""

    def curve(alpha: float) -> float:
        return alpha * alpha * ((scale + 1.0) * alpha - scale)

    return curve
