"""Derived operations over curve functions.

Every transform returns a new curve function and leaves its input
untouched:

- interpolate: remap a curve's output onto [start, end]
- flip: swap the two halves of a curve (INOUT -> OUTIN)
- clamped: clamp input to [0, 1] before delegating
- compose: apply one curve to the output of another
"""

from __future__ import annotations

import math

from easekit.core.curves.protocols import CurveFunction
from easekit.core.utils.math import clamp, fract


def interpolate(fn: CurveFunction, start: float, end: float, alpha: float) -> float:
    """Map a curve evaluation from [0, 1] onto [start, end].

    Args:
        fn: Curve function to evaluate.
        start: Output when the curve yields 0; overshooting curves go below it.
        end: Output when the curve yields 1; overshooting curves go above it.
        alpha: Progress, almost always in [0, 1].

    Returns:
        ``start + fn(alpha) * (end - start)``

    Example:
        >>> interpolate(lambda a: a, 10.0, 20.0, 0.25)
        12.5
    """
    return start + fn(alpha) * (end - start)


def flip(fn: CurveFunction) -> CurveFunction:
    """Swap the first and second halves of a curve.

    The returned curve behaves like the second half of ``fn`` for alpha
    below 0.5 and like the first half above it, offset by 0.5 so it still
    runs from 0 to 1. This turns an ease-in-then-out (INOUT) shape into an
    ease-out-then-in (OUTIN) one.

    The result is continuous only if ``fn(0) == 0``, ``fn(0.5) == 0.5`` and
    ``fn(1) == 1``; that is the caller's responsibility.

    At exactly ``alpha == 0.5`` the offset sign comes from ``+0.0`` and is
    positive, so ``flip(fn)(0.5) == fn(0.0) + 0.5``.

    Args:
        fn: Curve function to flip.

    Returns:
        New curve function with swapped halves.
    """

    def flipped(alpha: float) -> float:
        return fn(fract(alpha + 0.5)) + math.copysign(0.5, alpha - 0.5)

    return flipped


def clamped(fn: CurveFunction) -> CurveFunction:
    """Wrap a curve so its input is always clamped to [0, 1].

    Output is not clamped, and nan input is passed through.
    """

    def wrapper(alpha: float) -> float:
        return fn(clamp(alpha, 0.0, 1.0))

    return wrapper


def compose(outer: CurveFunction, inner: CurveFunction) -> CurveFunction:
    """Return ``outer(inner(alpha))``."""

    def composed(alpha: float) -> float:
        return outer(inner(alpha))

    return composed
