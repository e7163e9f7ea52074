"""Curve schema models.

- CurvePoint: a single sampled point (t, v) of an easing curve.

Only ``t`` is normalized; ``v`` is left unbounded because swing, spring
and elastic curves deliberately overshoot [0, 1].
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CurvePoint(BaseModel):
    """A single sampled point on an easing curve.

    This model is immutable (frozen=True).

    Attributes:
        t: Normalized progress in range [0, 1].
        v: Curve output at t (finite, may lie outside [0, 1]).

    Example:
        >>> point = CurvePoint(t=0.5, v=1.2)
        >>> point.v
        1.2
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized progress [0,1]")
    v: float = Field(..., description="Curve output")

    @field_validator("v")
    @classmethod
    def _validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("CurvePoint.v must be finite")
        return v
