"""Curve library: predefined catalogues and the named generator table.

Two catalogues are provided:

- ``build_default_registry`` - the interpolation catalogue, where
  ``Elastic.*`` is the bounce-count damped oscillation.
- ``build_tween_registry`` - the tween-equation catalogue, where that
  oscillation is registered as ``Spring.*`` and ``Elastic.*`` is the
  intensity/scale convention. It also carries the bias/gain presets.

``GENERATORS`` maps generator names to factories so curves can be declared
in configuration files and built with ``build_curve``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
import inspect
import logging
from typing import TYPE_CHECKING, Any, get_type_hints

from pydantic import TypeAdapter, ValidationError

from easekit.core.curves.functions import (
    bias_gain_function,
    bounce_function,
    bounce_in_function,
    bounce_out_function,
    cbrt_in,
    cbrt_out,
    circle,
    circle_in,
    circle_out,
    elastic_function,
    elastic_in_function,
    elastic_out_function,
    elastic_out_in_function,
    exp_function,
    exp_in_function,
    exp_out_function,
    kumaraswamy_function,
    linear,
    pow_function,
    pow_in_function,
    pow_out_function,
    pow_out_in_function,
    sine,
    sine_in,
    sine_out,
    smooth,
    smooth2,
    smoother,
    spring_function,
    spring_in_function,
    spring_out_function,
    spring_out_in_function,
    sqrt_in,
    sqrt_inout,
    sqrt_out,
    swing_function,
    swing_in_function,
    swing_out_function,
)
from easekit.core.curves.protocols import CurveFunction
from easekit.core.curves.registry import CurveRegistry, TaggedCurve
from easekit.core.curves.taxonomy import CurveVariant, make_tag
from easekit.core.curves.transforms import flip

if TYPE_CHECKING:
    from easekit.core.config.models import CustomCurveConfig

logger = logging.getLogger(__name__)


class Catalogue(str, Enum):
    """Identifiers for the predefined catalogues."""

    INTERPOLATIONS = "interpolations"
    TWEEN_EQUATIONS = "tween_equations"


# Power presets; Pow0_5 uses math.sqrt fast paths instead of these exponents
POWER_PRESETS: dict[str, float] = {
    "Pow2": 2.0,
    "Pow3": 3.0,
    "Pow4": 4.0,
    "Pow5": 5.0,
    "Pow0_75": 0.75,
    "Pow0_5": 0.5,
    "Pow0_25": 0.25,
}

# (value, power) for the normalized exponential family
EXP_PRESETS: dict[str, tuple[float, float]] = {
    "Exp5": (2.0, 5.0),
    "Exp10": (2.0, 10.0),
}

# (width, height) segments, largest bounce first
BOUNCE_PRESETS: dict[str, tuple[tuple[float, float], ...]] = {
    "Bounce2": ((1.2, 1.0), (0.4, 0.33)),
    "Bounce3": ((0.8, 1.0), (0.4, 0.33), (0.2, 0.1)),
    "Bounce4": ((0.65, 1.0), (0.325, 0.26), (0.2, 0.11), (0.15, 0.03)),
    "Bounce": ((0.68, 1.0), (0.34, 0.26), (0.2, 0.11), (0.15, 0.03)),
    "Bounce5": ((0.61, 1.0), (0.31, 0.45), (0.21, 0.3), (0.11, 0.15), (0.06, 0.06)),
}

SWING_PRESETS: dict[str, float] = {
    "Swing2": 2.0,
    "Swing": 1.5,
    "Swing3": 3.0,
    "Swing0_75": 0.75,
    "Swing0_5": 0.5,
}

# Tag -> (a, b)
KUMARASWAMY_PRESETS: dict[str, tuple[float, float]] = {
    "KumaraswamyExtremeA.INOUT": (0.75, 0.75),
    "KumaraswamyExtremeB.INOUT": (0.5, 0.5),
    "KumaraswamyExtremeC.INOUT": (0.25, 0.25),
    "KumaraswamyCentralA.INOUT": (2.0, 2.0),
    "KumaraswamyCentralB.INOUT": (4.0, 4.0),
    "KumaraswamyCentralC.INOUT": (6.0, 6.0),
    "KumaraswamyMostlyLow.INOUT": (1.0, 5.0),
    "KumaraswamyMostlyHigh.INOUT": (5.0, 1.0),
}

TWEEN_KUMARASWAMY_PRESETS: dict[str, tuple[float, float]] = {
    "KumaraswamyA.INOUT": (0.75, 0.75),
    "KumaraswamyB.INOUT": (0.5, 0.5),
    "KumaraswamyC.INOUT": (0.25, 0.25),
    "KumaraswamyA.OUTIN": (2.0, 2.0),
    "KumaraswamyB.OUTIN": (4.0, 4.0),
    "KumaraswamyC.OUTIN": (6.0, 6.0),
    "KumaraswamyD.IN": (1.0, 5.0),
    "KumaraswamyD.OUT": (5.0, 1.0),
}

# Tag -> (shape, turning)
BIAS_GAIN_PRESETS: dict[str, tuple[float, float]] = {
    "BiasGainA.OUTIN": (0.75, 0.5),
    "BiasGainB.OUTIN": (0.5, 0.5),
    "BiasGainC.OUTIN": (0.25, 0.5),
    "BiasGainA.INOUT": (2.0, 0.5),
    "BiasGainB.INOUT": (3.0, 0.5),
    "BiasGainC.INOUT": (4.0, 0.5),
    "BiasGainD.IN": (3.0, 0.9),
    "BiasGainD.OUT": (3.0, 0.1),
}

# (value, power, bounces, scale) for the bounce-count oscillation
SPRING_PARAMS: dict[str, tuple[float, float, int, float]] = {
    "INOUT": (2.0, 10.0, 7, 1.0),
    "OUT": (2.0, 10.0, 7, 1.0),
    "IN": (2.0, 10.0, 6, 1.0),
    "OUTIN": (2.0, 10.0, 7, 1.0),
}

# (base, exponent, intensity, scale) for the intensity/scale oscillation
ELASTIC_PARAMS: dict[str, tuple[float, float, float, float]] = {
    "INOUT": (2.0, 10.0, 0.45, 1.0),
    "OUT": (2.0, 10.0, 0.3, 1.0),
    "IN": (2.0, 10.0, 0.3, 1.0),
}

# Penner's "back" constants used by the tween catalogue
BACK_INOUT_SCALE = 1.2974547
BACK_SCALE = 1.70158

_ALIAS_VARIANTS = (CurveVariant.INOUT, CurveVariant.IN, CurveVariant.OUT, CurveVariant.OUTIN)


def _alias(registry: CurveRegistry, alias: str, target: str) -> None:
    """Register ``alias`` with the function already stored under ``target``."""
    curve = registry.get(target)
    if curve is None:
        raise KeyError(f"Cannot alias '{alias}': '{target}' is not registered")
    registry.add(alias, curve.fn)


def _register_smooth_and_power(registry: CurveRegistry) -> None:
    add = registry.add

    add("Linear.INOUT", linear)
    add("Smooth.INOUT", smooth)
    add("Smooth.OUTIN", flip(smooth))
    add("Smooth2.INOUT", smooth2)
    add("Smooth2.OUTIN", flip(smooth2))
    smoother_out_in = flip(smoother)
    add("Smoother.INOUT", smoother)
    add("Smoother.OUTIN", smoother_out_in)
    add("Fade.INOUT", smoother)
    add("Fade.OUTIN", smoother_out_in)

    for name, power in POWER_PRESETS.items():
        add(f"{name}.INOUT", sqrt_inout if power == 0.5 else pow_function(power))

    for name, power in POWER_PRESETS.items():
        add(f"{name}.IN", sqrt_in if power == 0.5 else pow_in_function(power))
        if name == "Pow2":
            _alias(registry, "SlowFast.IN", "Pow2.IN")
    add("Sqrt.IN", sqrt_in)
    add("Cbrt.IN", cbrt_in)

    for name, power in POWER_PRESETS.items():
        add(f"{name}.OUT", sqrt_out if power == 0.5 else pow_out_function(power))
        if name == "Pow2":
            _alias(registry, "FastSlow.OUT", "Pow2.OUT")
    add("Sqrt.OUT", sqrt_out)
    add("Cbrt.OUT", cbrt_out)

    for name, power in POWER_PRESETS.items():
        add(f"{name}.OUTIN", pow_out_in_function(power))
        if name == "Pow2":
            _alias(registry, "FastSlowFast.OUTIN", "Pow2.OUTIN")

    exp_inout = {name: exp_function(*params) for name, params in EXP_PRESETS.items()}
    for name, fn in exp_inout.items():
        add(f"{name}.INOUT", fn)
    for name, params in EXP_PRESETS.items():
        add(f"{name}.IN", exp_in_function(*params))
    for name, params in EXP_PRESETS.items():
        add(f"{name}.OUT", exp_out_function(*params))
    for name, fn in exp_inout.items():
        add(f"{name}.OUTIN", flip(fn))


def _register_presets(
    registry: CurveRegistry,
    presets: Mapping[str, tuple[float, float]],
    factory: Callable[[float, float], CurveFunction],
) -> None:
    for tag, params in presets.items():
        registry.add(tag, factory(*params))


def _register_shapes(registry: CurveRegistry) -> None:
    """Sine, circle, bounce and swing; shared by both catalogues."""
    add = registry.add

    add("Sine.INOUT", sine)
    add("Sine.IN", sine_in)
    add("Sine.OUT", sine_out)
    add("Sine.OUTIN", flip(sine))
    add("Circle.INOUT", circle)
    add("Circle.IN", circle_in)
    add("Circle.OUT", circle_out)
    add("Circle.OUTIN", flip(circle))

    bounce_inout = {name: bounce_function(pairs) for name, pairs in BOUNCE_PRESETS.items()}
    for name, fn in bounce_inout.items():
        add(f"{name}.INOUT", fn)
    for name, pairs in BOUNCE_PRESETS.items():
        add(f"{name}.OUT", bounce_out_function(pairs))
    for name, pairs in BOUNCE_PRESETS.items():
        add(f"{name}.IN", bounce_in_function(pairs))
    for name, fn in bounce_inout.items():
        add(f"{name}.OUTIN", flip(fn))

    swing_inout = {name: swing_function(scale) for name, scale in SWING_PRESETS.items()}
    for name, fn in swing_inout.items():
        add(f"{name}.INOUT", fn)
    # Swing.OUT and Swing.IN share Swing2's functions rather than using 1.5
    for name, scale in SWING_PRESETS.items():
        if name == "Swing":
            _alias(registry, "Swing.OUT", "Swing2.OUT")
        else:
            add(f"{name}.OUT", swing_out_function(scale))
    for name, scale in SWING_PRESETS.items():
        if name == "Swing":
            _alias(registry, "Swing.IN", "Swing2.IN")
        else:
            add(f"{name}.IN", swing_in_function(scale))
    for name, fn in swing_inout.items():
        add(f"{name}.OUTIN", flip(fn))


def _register_spring(registry: CurveRegistry, family: str) -> None:
    registry.add(make_tag(family, CurveVariant.INOUT), spring_function(*SPRING_PARAMS["INOUT"]))
    registry.add(make_tag(family, CurveVariant.OUT), spring_out_function(*SPRING_PARAMS["OUT"]))
    registry.add(make_tag(family, CurveVariant.IN), spring_in_function(*SPRING_PARAMS["IN"]))
    registry.add(make_tag(family, CurveVariant.OUTIN), spring_out_in_function(*SPRING_PARAMS["OUTIN"]))


def _register_power_aliases(registry: CurveRegistry) -> None:
    for alias, target in (
        ("Quad", "Pow2"),
        ("Cubic", "Pow3"),
        ("Quart", "Pow4"),
        ("Quint", "Pow5"),
        ("Expo", "Exp10"),
        ("Circ", "Circle"),
    ):
        for variant in _ALIAS_VARIANTS:
            _alias(registry, make_tag(alias, variant), make_tag(target, variant))


def build_default_registry() -> CurveRegistry:
    """Construct the interpolation catalogue.

    Returns:
        New registry; tags are in catalogue order.
    """
    registry = CurveRegistry()

    _register_smooth_and_power(registry)
    _register_presets(registry, KUMARASWAMY_PRESETS, kumaraswamy_function)
    _register_shapes(registry)
    _register_spring(registry, "Elastic")
    _register_power_aliases(registry)
    for variant in _ALIAS_VARIANTS:
        _alias(registry, make_tag("Back", variant), make_tag("Swing", variant))

    logger.debug("Built interpolation catalogue with %d curves", len(registry))
    return registry


def build_tween_registry() -> CurveRegistry:
    """Construct the tween-equation catalogue.

    Returns:
        New registry; tags are in catalogue order.
    """
    registry = CurveRegistry()
    add = registry.add

    _register_smooth_and_power(registry)
    _register_presets(registry, TWEEN_KUMARASWAMY_PRESETS, kumaraswamy_function)
    _register_presets(registry, BIAS_GAIN_PRESETS, bias_gain_function)
    _register_shapes(registry)
    _register_spring(registry, "Spring")

    elastic_inout = elastic_function(*ELASTIC_PARAMS["INOUT"])
    add("Elastic.INOUT", elastic_inout)
    add("Elastic.OUT", elastic_out_function(*ELASTIC_PARAMS["OUT"]))
    add("Elastic.IN", elastic_in_function(*ELASTIC_PARAMS["IN"]))
    add("Elastic.OUTIN", flip(elastic_inout))

    _register_power_aliases(registry)
    back = swing_function(BACK_INOUT_SCALE)
    add("Back.INOUT", back)
    add("Back.OUT", swing_out_function(BACK_SCALE))
    add("Back.IN", swing_in_function(BACK_SCALE))
    add("Back.OUTIN", flip(back))

    logger.debug("Built tween-equation catalogue with %d curves", len(registry))
    return registry


CATALOGUE_BUILDERS: dict[Catalogue, Callable[[], CurveRegistry]] = {
    Catalogue.INTERPOLATIONS: build_default_registry,
    Catalogue.TWEEN_EQUATIONS: build_tween_registry,
}


def build_catalogue(catalogue: Catalogue | str) -> CurveRegistry:
    """Build a fresh registry for the named catalogue.

    Raises:
        ValueError: If the catalogue name is unknown.
    """
    return CATALOGUE_BUILDERS[Catalogue(catalogue)]()


def _fixed(fn: CurveFunction) -> Callable[[], CurveFunction]:
    def factory() -> CurveFunction:
        return fn

    return factory


GENERATORS: dict[str, Callable[..., CurveFunction]] = {
    "linear": _fixed(linear),
    "smooth": _fixed(smooth),
    "smooth2": _fixed(smooth2),
    "smoother": _fixed(smoother),
    "sine": _fixed(sine),
    "sine_in": _fixed(sine_in),
    "sine_out": _fixed(sine_out),
    "circle": _fixed(circle),
    "circle_in": _fixed(circle_in),
    "circle_out": _fixed(circle_out),
    "pow": pow_function,
    "pow_in": pow_in_function,
    "pow_out": pow_out_function,
    "pow_out_in": pow_out_in_function,
    "exp": exp_function,
    "exp_in": exp_in_function,
    "exp_out": exp_out_function,
    "bounce": bounce_function,
    "bounce_in": bounce_in_function,
    "bounce_out": bounce_out_function,
    "swing": swing_function,
    "swing_in": swing_in_function,
    "swing_out": swing_out_function,
    "spring": spring_function,
    "spring_in": spring_in_function,
    "spring_out": spring_out_function,
    "spring_out_in": spring_out_in_function,
    "elastic": elastic_function,
    "elastic_in": elastic_in_function,
    "elastic_out": elastic_out_function,
    "elastic_out_in": elastic_out_in_function,
    "kumaraswamy": kumaraswamy_function,
    "bias_gain": bias_gain_function,
}


def _coerce_params(factory: Callable[..., CurveFunction], kwargs: dict[str, Any]) -> dict[str, Any]:
    """Validate and coerce keyword parameters against the factory annotations."""
    hints = get_type_hints(factory)
    return {name: TypeAdapter(hints.get(name, Any)).validate_python(value) for name, value in kwargs.items()}


def build_curve(generator: str, params: Mapping[str, Any] | None = None) -> CurveFunction:
    """Build a curve function from a generator name and keyword parameters.

    Args:
        generator: Key in ``GENERATORS`` (e.g. ``"pow"``, ``"bounce_out"``).
        params: Keyword arguments for the factory. The bounce family takes
            ``pairs``, a list of ``[width, height]`` pairs.

    Returns:
        Curve function.

    Raises:
        ValueError: If the generator is unknown, or the parameters do not
            match its signature or cannot be coerced to the annotated types
            (``"2"`` is accepted for a float, ``"abc"`` is not).

    Example:
        >>> quad = build_curve("pow", {"power": 2.0})
        >>> quad(0.25)
        0.125
    """
    try:
        factory = GENERATORS[generator]
    except KeyError as exc:
        raise ValueError(f"Unknown curve generator '{generator}'") from exc

    kwargs = dict(params or {})
    try:
        inspect.signature(factory).bind(**kwargs)
        kwargs = _coerce_params(factory, kwargs)
    except (TypeError, ValidationError) as exc:
        raise ValueError(f"Invalid parameters for generator '{generator}': {exc}") from exc
    return factory(**kwargs)


def register_custom_curves(
    registry: CurveRegistry, configs: Iterable[CustomCurveConfig]
) -> list[TaggedCurve]:
    """Build and register configuration-declared curves.

    Custom curves are registered after the catalogue, so a custom curve
    with a catalogue tag replaces the predefined one.

    Returns:
        The registered curves, in declaration order.
    """
    registered = []
    for config in configs:
        fn = build_curve(config.generator, config.params)
        if config.flip:
            fn = flip(fn)
        registered.append(registry.add(config.tag, fn))
        logger.debug("Registered custom curve '%s' (%s)", config.tag, config.generator)
    return registered
