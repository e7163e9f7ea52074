"""Tagged curves and the tag-to-curve registry."""

from __future__ import annotations

from collections.abc import Iterator, KeysView
from dataclasses import dataclass, field
import logging

from easekit.core.curves.protocols import CurveFunction
from easekit.core.curves.transforms import flip, interpolate
from easekit.core.utils.math import clamp

logger = logging.getLogger(__name__)


def _identity(alpha: float) -> float:
    return alpha


@dataclass(frozen=True)
class TaggedCurve:
    """A named curve function with clamped input.

    Equality and hashing use ``tag`` only: two TaggedCurves with the same
    tag compare equal even if they wrap different functions.

    Construction has no side effects; use ``CurveRegistry.register`` (or
    ``register``) to make a curve reachable by tag.

    Attributes:
        tag: Unique identifier, conventionally ``"Family.VARIANT"``.
        fn: The raw curve function. It only ever sees inputs in [0, 1]
            when called through this wrapper.
    """

    tag: str = "Linear.INOUT"
    fn: CurveFunction = field(default=_identity, compare=False, repr=False)

    def compute(self, alpha: float) -> float:
        """Evaluate the wrapped function with alpha clamped to [0, 1].

        The output is not clamped, so overshooting curves still overshoot.
        A nan alpha is passed through to the function unchanged.
        """
        return self.fn(clamp(alpha, 0.0, 1.0))

    def __call__(self, alpha: float) -> float:
        return self.compute(alpha)

    def compute_range(self, start: float, end: float, alpha: float) -> float:
        """Evaluate with clamped alpha and remap the result onto [start, end]."""
        return interpolate(self.compute, start, end, alpha)

    def flip(self) -> CurveFunction:
        """Return the half-swapped version of the wrapped function."""
        return flip(self.fn)

    def __str__(self) -> str:
        return self.tag


class CurveRegistry:
    """Insertion-ordered mapping from tag to TaggedCurve.

    Registering a tag that already exists replaces the previous entry; the
    old TaggedCurve stays usable by anyone holding it but is no longer
    reachable by lookup.

    Not synchronized. Populate from a single thread, then share read-only.
    """

    def __init__(self) -> None:
        self._registry: dict[str, TaggedCurve] = {}

    def register(self, curve: TaggedCurve) -> TaggedCurve:
        """Register a curve under its tag, replacing any existing entry."""
        if curve.tag in self._registry:
            logger.debug("Replacing registered curve '%s'", curve.tag)
        self._registry[curve.tag] = curve
        return curve

    def add(self, tag: str, fn: CurveFunction) -> TaggedCurve:
        """Wrap ``fn`` in a TaggedCurve and register it."""
        return self.register(TaggedCurve(tag, fn))

    def get(self, tag: str) -> TaggedCurve | None:
        """Look up a curve by exact tag; None when absent."""
        return self._registry.get(tag)

    lookup = get

    def tags(self) -> KeysView[str]:
        """Registered tags in insertion order.

        This is a live view: later registrations show up in it.
        """
        return self._registry.keys()

    def curves(self) -> list[TaggedCurve]:
        """Snapshot list of every registered curve, in insertion order."""
        return list(self._registry.values())

    def clear(self) -> None:
        """Remove every entry."""
        self._registry.clear()

    def __contains__(self, tag: object) -> bool:
        return tag in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[TaggedCurve]:
        return iter(self.curves())


def register(registry: CurveRegistry, curve: TaggedCurve) -> TaggedCurve:
    """Convenience wrapper for registering a curve."""
    return registry.register(curve)


_default_registry: CurveRegistry | None = None


def get_default_registry() -> CurveRegistry:
    """Return the process-wide registry of predefined curves.

    Built on first use from ``build_default_registry`` and reused after
    that. Call ``reset_default_registry`` to discard it.
    """
    global _default_registry

    if _default_registry is None:
        from easekit.core.curves.library import build_default_registry

        _default_registry = build_default_registry()
    return _default_registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next access rebuilds it."""
    global _default_registry
    _default_registry = None
