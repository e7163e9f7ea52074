"""Curve tag taxonomy.

Tags follow the ``"Family.VARIANT"`` convention, e.g. ``"Pow2.INOUT"`` or
``"Bounce.OUT"``. The variant names the overall shape:

- IN: starts slowly (or winds up) and ends fast
- OUT: starts fast and ends slowly (or settles)
- INOUT: slow at both ends, fast in the middle
- OUTIN: fast at both ends, slow in the middle
"""

from __future__ import annotations

from enum import Enum

from easekit.core.curves.registry import CurveRegistry, TaggedCurve


class CurveVariant(str, Enum):
    """Shape variant encoded in the suffix of a tag."""

    IN = "IN"
    OUT = "OUT"
    INOUT = "INOUT"
    OUTIN = "OUTIN"


def make_tag(family: str, variant: CurveVariant | str) -> str:
    """Compose a tag from a family name and a variant.

    Raises:
        ValueError: If the family is empty or contains a dot, or the variant
            is unknown.

    Example:
        >>> make_tag("Pow2", CurveVariant.OUTIN)
        'Pow2.OUTIN'
    """
    if not family or "." in family:
        raise ValueError(f"Invalid curve family '{family}'")
    return f"{family}.{CurveVariant(variant).value}"


def split_tag(tag: str) -> tuple[str, CurveVariant]:
    """Split a tag into its family and variant.

    Raises:
        ValueError: If the tag does not follow ``"Family.VARIANT"``.
    """
    family, sep, suffix = tag.rpartition(".")
    if not sep or not family:
        raise ValueError(f"Malformed curve tag '{tag}'")
    try:
        variant = CurveVariant(suffix)
    except ValueError as exc:
        raise ValueError(f"Unknown variant '{suffix}' in curve tag '{tag}'") from exc
    return family, variant


def _parse(tag: str) -> tuple[str, CurveVariant] | None:
    try:
        return split_tag(tag)
    except ValueError:
        return None


def families(registry: CurveRegistry) -> list[str]:
    """Distinct families in the registry, in first-registration order.

    Tags that do not follow the convention are skipped.
    """
    seen: dict[str, None] = {}
    for tag in registry.tags():
        parsed = _parse(tag)
        if parsed is not None:
            seen.setdefault(parsed[0], None)
    return list(seen)


def curves_for_variant(registry: CurveRegistry, variant: CurveVariant | str) -> list[TaggedCurve]:
    """All registered curves whose tag ends in the given variant."""
    wanted = CurveVariant(variant)
    return [
        curve
        for curve in registry.curves()
        if (parsed := _parse(curve.tag)) is not None and parsed[1] is wanted
    ]
