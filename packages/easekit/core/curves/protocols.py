"""Protocol definitions for curve functions.

A curve function is any pure callable mapping a progress value (alpha,
almost always in [0, 1]) to an output value that is usually, but not
always, in [0, 1].
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CurveFunction(Protocol):
    """Stateless mapping from progress to output.

    Plain functions, lambdas and the closures returned by the generator
    factories in ``easekit.core.curves.functions`` all satisfy this protocol.

    Example:
        >>> def half_speed(alpha: float) -> float:
        ...     return alpha * 0.5
        >>> isinstance(half_speed, CurveFunction)
        True
    """

    def __call__(self, alpha: float) -> float:
        """Evaluate the curve.

        Args:
            alpha: Progress, almost always in [0, 1]

        Returns:
            Curve output; some families overshoot [0, 1]
        """
        ...
