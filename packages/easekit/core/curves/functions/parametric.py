"""Parametric curve factories: Kumaraswamy CDF and the Barron bias/gain spline.

Both families take two shape parameters and cover a wide range of
S-shaped and biased curves. Parameters are not validated; a zero or
negative parameter flows through as inf or nan instead of raising.
"""

from __future__ import annotations

import sys

from easekit.core.curves.protocols import CurveFunction
from easekit.core.utils.math import ieee_div, ieee_pow

# Smallest positive normal binary64; keeps the spline denominator away from 0
MIN_NORMAL = sys.float_info.min


def kumaraswamy_function(a: float, b: float) -> CurveFunction:
    """Inverse-style Kumaraswamy CDF: ``(1 - (1 - x) ** (1/b)) ** (1/a)``.

    Values of ``a`` and ``b`` below 1 give an S-curve with a steep middle;
    values above 1 give steep ends and a flat middle. Setting
    one of them to 1 biases the curve toward 0 or 1.

    Args:
        a: Shape parameter, expected > 0.
        b: Shape parameter, expected > 0.

    Returns:
        Curve function.
    """
    inv_a = ieee_div(1.0, a)
    inv_b = ieee_div(1.0, b)

    def curve(alpha: float) -> float:
        return ieee_pow(1.0 - ieee_pow(1.0 - alpha, inv_b), inv_a)

    return curve


def barron_spline(x: float, shape: float, turning: float) -> float:
    """Evaluate Jonathan Barron's bias/gain spline.

    See "A Convenient Generalization of Schlick's Bias and Gain Functions",
    https://arxiv.org/abs/2010.09714.

    Args:
        x: Input in [0, 1].
        shape: Steepness, expected >= 0. Values above 1 steepen around
            ``turning``; values below 1 flatten there.
        turning: Location of the inflection, in [0, 1].

    Returns:
        Spline value; ``shape=1, turning=0.5`` is the identity.
    """
    d = turning - x
    if x <= turning:
        return ieee_div(turning * x, x + shape * d + MIN_NORMAL)
    return ieee_div((1.0 - turning) * (x - 1.0), 1.0 - x - shape * d + MIN_NORMAL) + 1.0


def bias_gain_function(shape: float, turning: float) -> CurveFunction:
    """Bias/gain curve built on :func:`barron_spline`.

    A turning point of 0.5 gives a symmetric S (shape > 1) or inverse-S
    (shape < 1). Moving the turning point toward 0 or 1 biases the curve
    toward fast-then-slow or slow-then-fast motion.
    """

    def curve(alpha: float) -> float:
        return barron_spline(alpha, shape, turning)

    return curve
