"""Curve function generators grouped by family."""

from easekit.core.curves.functions.basic import (
    circle,
    circle_in,
    circle_out,
    fade,
    linear,
    sine,
    sine_in,
    sine_out,
    smooth,
    smooth2,
    smoother,
)
from easekit.core.curves.functions.dynamic import (
    bounce_function,
    bounce_in_function,
    bounce_out_function,
    elastic_function,
    elastic_in_function,
    elastic_out_function,
    elastic_out_in_function,
    spring_function,
    spring_in_function,
    spring_out_function,
    spring_out_in_function,
)
from easekit.core.curves.functions.easing import (
    cbrt_in,
    cbrt_out,
    exp_function,
    exp_in_function,
    exp_out_function,
    pow_function,
    pow_in_function,
    pow_out_function,
    pow_out_in_function,
    sqrt_in,
    sqrt_inout,
    sqrt_out,
    swing_function,
    swing_in_function,
    swing_out_function,
)
from easekit.core.curves.functions.parametric import (
    barron_spline,
    bias_gain_function,
    kumaraswamy_function,
)

__all__ = [
    "barron_spline",
    "bias_gain_function",
    "bounce_function",
    "bounce_in_function",
    "bounce_out_function",
    "cbrt_in",
    "cbrt_out",
    "circle",
    "circle_in",
    "circle_out",
    "elastic_function",
    "elastic_in_function",
    "elastic_out_function",
    "elastic_out_in_function",
    "exp_function",
    "exp_in_function",
    "exp_out_function",
    "fade",
    "kumaraswamy_function",
    "linear",
    "pow_function",
    "pow_in_function",
    "pow_out_function",
    "pow_out_in_function",
    "sine",
    "sine_in",
    "sine_out",
    "smooth",
    "smooth2",
    "smoother",
    "spring_function",
    "spring_in_function",
    "spring_out_function",
    "spring_out_in_function",
    "sqrt_in",
    "sqrt_inout",
    "sqrt_out",
    "swing_function",
    "swing_in_function",
    "swing_out_function",
]
