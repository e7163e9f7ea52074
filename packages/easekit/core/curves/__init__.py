"""Easing curve algebra: tagged curves, registries and catalogues."""

from easekit.core.curves.library import (
    Catalogue,
    build_catalogue,
    build_curve,
    build_default_registry,
    build_tween_registry,
)
from easekit.core.curves.registry import (
    CurveRegistry,
    TaggedCurve,
    get_default_registry,
    register,
    reset_default_registry,
)
from easekit.core.curves.taxonomy import CurveVariant
from easekit.core.curves.transforms import flip, interpolate

__all__ = [
    "Catalogue",
    "CurveRegistry",
    "CurveVariant",
    "TaggedCurve",
    "build_catalogue",
    "build_curve",
    "build_default_registry",
    "build_tween_registry",
    "flip",
    "get_default_registry",
    "interpolate",
    "register",
    "reset_default_registry",
]
