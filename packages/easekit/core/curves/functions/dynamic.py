"""Dynamic curve factories: bounce, spring and elastic.

These families model physical motion and deliberately leave [0, 1]:
bounce parabolas can poke slightly outside it, spring and elastic curves
overshoot substantially.

Bounce OUT and spring IN, OUT and OUTIN blend linearly toward their exact
limits over the last (or first) 2% of input so no residual oscillation
survives at the endpoints.

Two damped-oscillation conventions are provided:

- spring: ``(value, power, bounces, scale)``, a decaying sine with a
  whole number of half-waves.
- elastic: ``(base, exponent, intensity, scale)``, the Penner-style
  period/amplitude convention where ``scale >= 1`` raises the amplitude
  and shifts the phase through ``asin(1 / scale)``.
"""

from __future__ import annotations

from collections.abc import Sequence
import math

from easekit.core.curves.protocols import CurveFunction
from easekit.core.curves.transforms import flip
from easekit.core.utils.math import blend_toward, ieee_div, ieee_pow, ieee_sin

TAU = math.tau

# Endpoint blend window: the last (or first) 2% of alpha
_BLEND_EDGE = 0.02
_BLEND_RATE = 1.0 / _BLEND_EDGE

BouncePairs = Sequence[tuple[float, float]]

# ---------------------------------------------------------------------------
# Bounce
# ---------------------------------------------------------------------------


def _freeze_pairs(pairs: BouncePairs) -> tuple[tuple[float, float], ...]:
    frozen = tuple((float(width), float(height)) for width, height in pairs)
    if not frozen:
        raise ValueError("pairs must contain at least one (width, height) bounce")
    return frozen


def bounce_out_function(pairs: BouncePairs) -> CurveFunction:
    """Rise to 1 and bounce to rest on it (OUT).

    Each ``(width, height)`` pair describes one parabolic segment of the
    trajectory; the first segment is entered halfway through, so the curve
    starts at 0 and lands on 1 at ``width[0] / 2``. Later segments should
    usually shrink in both width and height.

    Args:
        pairs: Sequence of (width, height) pairs.

    Returns:
        Curve function ending exactly at 1.0.
    """
    segments = _freeze_pairs(pairs)
    offset = segments[0][0] * 0.5

    def curve(alpha: float) -> float:
        b = alpha + offset
        width = height = 0.0
        for width, candidate in segments:
            if b <= width:
                height = candidate
                break
            b -= width
        # past the last segment: height stays 0 and the curve rests at 1
        z = ieee_div(4.0, width * width) * height * b
        f = 1.0 - z * (width - b)
        if alpha >= 1.0 - _BLEND_EDGE:
            return blend_toward(f, 1.0, _BLEND_RATE * (alpha - (1.0 - _BLEND_EDGE)))
        return f

    return curve


def bounce_in_function(pairs: BouncePairs) -> CurveFunction:
    """Bounce off 0 before rising to 1 (IN); mirror image of OUT."""
    out = bounce_out_function(pairs)

    def curve(alpha: float) -> float:
        return 1.0 - out(1.0 - alpha)

    return curve


def bounce_function(pairs: BouncePairs) -> CurveFunction:
    """Bounce at both ends (INOUT).

    The half-curves are built from the OUT shape with its first half-segment
    replaced by a straight ramp, then mirrored about (0.5, 0.5).
    """
    out = bounce_out_function(pairs)
    first_width = _freeze_pairs(pairs)[0][0]
    half_width = first_width * 0.5

    def half(o: float) -> float:
        test = o + half_width
        if test < first_width:
            return ieee_div(test, half_width) - 1.0
        return out(o)

    def curve(alpha: float) -> float:
        if alpha <= 0.5:
            return (1.0 - half(1.0 - alpha - alpha)) * 0.5
        return half(alpha + alpha - 1.0) * 0.5 + 0.5

    return curve


# ---------------------------------------------------------------------------
# Spring (value, power, bounces, scale)
# ---------------------------------------------------------------------------


def _half_waves(bounces: int) -> float:
    # odd bounce counts flip the sign so every variant starts heading the same way
    return bounces * (0.5 - (int(bounces) & 1))


def spring_function(value: float, power: float, bounces: int, scale: float) -> CurveFunction:
    """Damped oscillation at both ends (INOUT).

    Args:
        value: Base of the exponential envelope (2 is typical).
        power: Envelope steepness (10 is typical).
        bounces: Number of half-oscillations.
        scale: Amplitude multiplier.
    """
    bounce = _half_waves(bounces) * TAU

    def curve(alpha: float) -> float:
        if alpha <= 0.5:
            a = alpha + alpha
            return ieee_pow(value, power * (a - 1.0)) * math.sin(a * bounce) * scale * 0.5
        a = 2.0 - alpha - alpha
        return 1.0 - ieee_pow(value, power * (a - 1.0)) * math.sin(a * bounce) * scale * 0.5

    return curve


def spring_out_function(value: float, power: float, bounces: int, scale: float) -> CurveFunction:
    """Overshoot and oscillate around 1 before settling (OUT).

    Fades in linearly from exactly 0 over the first 2% of input.
    """
    bounce = _half_waves(bounces)

    def curve(alpha: float) -> float:
        f = 1.0 - ieee_pow(value, power * -alpha) * math.sin((bounce - alpha * bounce) * TAU) * scale
        if alpha <= _BLEND_EDGE:
            return blend_toward(0.0, f, alpha * _BLEND_RATE)
        return f

    return curve


def spring_in_function(value: float, power: float, bounces: int, scale: float) -> CurveFunction:
    """Oscillate around 0 with growing amplitude, then snap to 1 (IN).

    Blends linearly to exactly 1 over the last 2% of input.
    """
    bounce = _half_waves(bounces) * TAU

    def curve(alpha: float) -> float:
        f = ieee_pow(value, power * (alpha - 1.0)) * math.sin(alpha * bounce) * scale
        if alpha >= 1.0 - _BLEND_EDGE:
            return blend_toward(f, 1.0, _BLEND_RATE * (alpha - (1.0 - _BLEND_EDGE)))
        return f

    return curve


def spring_out_in_function(value: float, power: float, bounces: int, scale: float) -> CurveFunction:
    """Oscillate around the midpoint (OUTIN).

    Closed form with a quarter-wave phase shift, passing through 0.5 at the
    midpoint. The closed form only lands on 0 and 1 for odd bounce counts
    at unit scale, so the first and last 2% of input blend to exactly 0
    and exactly 1.
    """
    bounce = (_half_waves(bounces) - 0.25) * TAU

    def curve(alpha: float) -> float:
        if alpha > 0.5:
            a = alpha + alpha - 1.0
            f = ieee_pow(value, power * (a - 1.0)) * math.sin(a * bounce) * scale * 0.5 + 0.5
            if alpha >= 1.0 - _BLEND_EDGE:
                return blend_toward(f, 1.0, _BLEND_RATE * (alpha - (1.0 - _BLEND_EDGE)))
            return f
        a = 1.0 - alpha - alpha
        f = 0.5 - ieee_pow(value, power * (a - 1.0)) * math.sin(a * bounce) * scale * 0.5
        if alpha <= _BLEND_EDGE:
            return blend_toward(0.0, f, alpha * _BLEND_RATE)
        return f

    return curve


# ---------------------------------------------------------------------------
# Elastic (base, exponent, intensity, scale)
# ---------------------------------------------------------------------------


def _elastic_shape(intensity: float, scale: float) -> tuple[float, float]:
    """Return (amplitude, phase shift) for the elastic convention."""
    if scale < 1.0:
        return 1.0, intensity * 0.25
    return scale, intensity / TAU * math.asin(1.0 / scale)


def elastic_function(base: float, exponent: float, intensity: float, scale: float) -> CurveFunction:
    """Elastic twang at both ends (INOUT).

    Args:
        base: Base of the exponential envelope (2 is typical).
        exponent: Envelope steepness (10 is typical).
        intensity: Oscillation period as a fraction of the half-curve.
        scale: Amplitude; values >= 1 also shift the phase so the curve
            still terminates at 1.
    """
    amplitude, shift = _elastic_shape(intensity, scale)
    frequency = ieee_div(TAU, intensity)

    def curve(alpha: float) -> float:
        if alpha >= 1.0:
            return 1.0
        t = alpha * 2.0 - 1.0
        if t < 0.0:
            return -0.5 * (amplitude * ieee_pow(base, exponent * t) * ieee_sin((t - shift) * frequency))
        return amplitude * ieee_pow(base, -exponent * t) * ieee_sin((t - shift) * frequency) * 0.5 + 1.0

    return curve


def elastic_out_function(
    base: float, exponent: float, intensity: float, scale: float
) -> CurveFunction:
    """Elastic overshoot around 1 (OUT)."""
    amplitude, shift = _elastic_shape(intensity, scale)
    frequency = ieee_div(TAU, intensity)

    def curve(alpha: float) -> float:
        if alpha >= 1.0:
            return 1.0
        return amplitude * ieee_pow(base, -exponent * alpha) * ieee_sin((alpha - shift) * frequency) + 1.0

    return curve


def elastic_in_function(
    base: float, exponent: float, intensity: float, scale: float
) -> CurveFunction:
    """Elastic wind-up around 0 (IN)."""
    amplitude, shift = _elastic_shape(intensity, scale)
    frequency = ieee_div(TAU, intensity)

    def curve(alpha: float) -> float:
        if alpha >= 1.0:
            return 1.0
        t = alpha - 1.0
        return -(amplitude * ieee_pow(base, exponent * t) * ieee_sin((t - shift) * frequency))

    return curve


def elastic_out_in_function(
    base: float, exponent: float, intensity: float, scale: float
) -> CurveFunction:
    """Elastic twang around the midpoint (OUTIN), the flip of INOUT."""
    return flip(elastic_function(base, exponent, intensity, scale))
