"""Command-line interface for easekit.

Lists the curves of a catalogue, evaluates a single curve, or samples a
curve on a uniform grid.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from easekit.core.config.loader import build_registry, load_app_config
from easekit.core.config.models import AppConfig
from easekit.core.curves.library import Catalogue
from easekit.core.curves.registry import CurveRegistry
from easekit.core.curves.sampling import sample_curve
from easekit.core.curves.taxonomy import CurveVariant, curves_for_variant, families, split_tag
from easekit.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _describe_tag(tag: str) -> tuple[str, str]:
    try:
        family, variant = split_tag(tag)
    except ValueError:
        return tag, "-"
    return family, variant.value


def _load_registry(args: argparse.Namespace) -> CurveRegistry | None:
    """Load config, configure logging and build the registry; None on error."""
    try:
        config = load_app_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return None

    configure_logging(
        level=args.log_level or config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )

    catalogue = getattr(args, "catalogue", None)
    if catalogue:
        config = config.model_copy(update={"catalogue": Catalogue(catalogue)})

    try:
        return build_registry(config)
    except ValueError as e:
        console.print(f"[red]ERROR: Could not build curves: {escape(str(e))}[/red]")
        return None


def run_list(args: argparse.Namespace) -> int:
    """Print every registered curve, optionally filtered by variant."""
    registry = _load_registry(args)
    if registry is None:
        return 1

    curves = curves_for_variant(registry, args.variant) if args.variant else registry.curves()

    table = Table(title="Curves")
    table.add_column("Tag")
    table.add_column("Family")
    table.add_column("Variant")
    table.add_column("f(0.5)", justify="right")
    for curve in curves:
        family, variant = _describe_tag(curve.tag)
        table.add_row(curve.tag, family, variant, f"{curve(0.5):.6f}")

    console.print(table)
    console.print(f"{len(curves)} curves ({len(families(registry))} families registered)")
    return 0


def run_eval(args: argparse.Namespace) -> int:
    """Evaluate one curve at one alpha and print the result."""
    registry = _load_registry(args)
    if registry is None:
        return 1

    curve = registry.get(args.tag)
    if curve is None:
        console.print(f"[red]ERROR: Unknown curve tag: {args.tag}[/red]")
        return 1

    console.print(repr(curve.compute_range(args.start, args.end, args.alpha)))
    return 0


def run_sample(args: argparse.Namespace) -> int:
    """Sample one curve on a uniform grid and print the points."""
    registry = _load_registry(args)
    if registry is None:
        return 1

    curve = registry.get(args.tag)
    if curve is None:
        console.print(f"[red]ERROR: Unknown curve tag: {args.tag}[/red]")
        return 1

    try:
        points = sample_curve(curve, args.samples, args.start, args.end)
    except ValueError as e:
        console.print(f"[red]ERROR: Could not sample {args.tag}: {e}[/red]")
        return 1

    table = Table(title=args.tag)
    table.add_column("t", justify="right")
    table.add_column("v", justify="right")
    for point in points:
        table.add_row(f"{point.t:.4f}", f"{point.v:.6f}")
    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="easekit",
        description="easekit - tagged easing curves for animation and tweening",
    )
    p.add_argument(
        "--config",
        default=None,
        help=f"Path to app config JSON/YAML (default: {AppConfig.default_path()} if present)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    list_cmd = sub.add_parser("list", help="List registered curves")
    list_cmd.add_argument(
        "--catalogue",
        choices=[c.value for c in Catalogue],
        default=None,
        help="Catalogue to list (default: from config)",
    )
    list_cmd.add_argument(
        "--variant",
        choices=[v.value for v in CurveVariant],
        default=None,
        help="Only list curves of this variant",
    )
    list_cmd.set_defaults(func=run_list)

    eval_cmd = sub.add_parser("eval", help="Evaluate a curve at one point")
    eval_cmd.add_argument("tag", help="Curve tag, e.g. Pow2.INOUT")
    eval_cmd.add_argument("alpha", type=float, help="Progress, clamped to [0, 1]")
    eval_cmd.add_argument("--start", type=float, default=0.0, help="Output at curve value 0")
    eval_cmd.add_argument("--end", type=float, default=1.0, help="Output at curve value 1")
    eval_cmd.set_defaults(func=run_eval)

    sample_cmd = sub.add_parser("sample", help="Sample a curve on a uniform grid")
    sample_cmd.add_argument("tag", help="Curve tag, e.g. Bounce.OUT")
    sample_cmd.add_argument("--samples", type=int, default=11, help="Number of samples (>= 2)")
    sample_cmd.add_argument("--start", type=float, default=0.0, help="Output at curve value 0")
    sample_cmd.add_argument("--end", type=float, default=1.0, help="Output at curve value 1")
    sample_cmd.set_defaults(func=run_sample)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    p = build_arg_parser()
    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
