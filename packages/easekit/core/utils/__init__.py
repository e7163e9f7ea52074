"""Shared utilities for easekit."""

from easekit.core.utils.math import blend_toward, clamp, fract, ieee_div, ieee_pow, ieee_sin

__all__ = [
    "blend_toward",
    "clamp",
    "fract",
    "ieee_div",
    "ieee_pow",
    "ieee_sin",
]
