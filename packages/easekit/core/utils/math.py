"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    nan is returned unchanged rather than pinned to ``max_val``.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    if value != value:  # nan
        return value
    return max(min_val, min(max_val, value))


def blend_toward(value: float, target: float, weight: float) -> float:
    """Blend value toward target, landing exactly on target at weight >= 1.

    The weight is capped at 1 and the two endpoints are weighted
    separately, so ``blend_toward(v, 1.0, 1.0) == 1.0`` holds bit-for-bit
    for every finite ``v``.

    Args:
        value: Starting value (weight 0)
        target: Value reached at weight 1
        weight: Blend factor, capped at 1

    Returns:
        Blended value
    """
    weight = min(weight, 1.0)
    return value * (1.0 - weight) + target * weight


def ieee_pow(base: float, exponent: float) -> float:
    """Power with IEEE-754 results instead of Python exceptions.

    ``math.pow`` raises for ``0 ** -1`` or a negative base with a fractional
    exponent, and ``**`` may return a complex number. This returns inf or
    nan in those cases.
    """
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def ieee_div(numerator: float, denominator: float) -> float:
    """Division returning inf or nan instead of raising ZeroDivisionError."""
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_sin(radians: float) -> float:
    """Sine returning nan for infinite input instead of raising ValueError."""
    with np.errstate(all="ignore"):
        return float(np.sin(np.float64(radians)))


def fract(t: float) -> float:
    """Fractional part of t, in [0, 1) for finite t.

    Behaves like GLSL ``fract``: negative inputs are wrapped rather than
    mirrored, so ``fract(-0.25) == 0.75``.

    Args:
        t: Any float

    Returns:
        ``t - floor(t)``, or nan when t is not finite
    """
    if not math.isfinite(t):
        return math.nan
    return t - math.floor(t)
