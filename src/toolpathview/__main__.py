"""CLI entry point: ``python -m toolpathview program.nc``"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .config.presets import DetailPreset, get_preset
from .config.settings import AppSettings
from .core.interpreter import parse_gcode
from .core.toolpath.lod import prepare_render_segments
from .gcode.validate import validate_document


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="toolpathview",
        description="Interpret a G-code program and summarize its toolpath geometry.",
    )
    p.add_argument("input", type=Path, help="G-code program (.nc, .ngc, .gcode)")
    p.add_argument(
        "--preset", choices=[p.value for p in DetailPreset], default=None,
        help="Detail preset (default: from settings, else standard)",
    )
    p.add_argument("--max-points", type=int, default=None,
                   help="Render point budget, 0 for unlimited")
    p.add_argument("--no-lod", action="store_true",
                   help="Disable level-of-detail reduction")
    p.add_argument("--z-levels", action="store_true",
                   help="List distinct Z levels with their normalized height")
    p.add_argument("--check", action="store_true",
                   help="Validate the parsed document structure")
    p.add_argument("--settings", type=Path, default=None,
                   help="Settings file (default: ~/.toolpathview/settings.json)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log parser diagnostics")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = AppSettings.load(args.settings)
    preset = DetailPreset(args.preset) if args.preset else settings.preset
    profile = get_preset(preset)

    lod = profile.lod
    if args.preset is None:
        lod = dataclasses.replace(
            lod,
            max_points=settings.max_points,
            enabled=settings.use_level_of_detail,
        )
    if args.max_points is not None:
        lod = dataclasses.replace(lod, max_points=args.max_points)
    if args.no_lod:
        lod = dataclasses.replace(lod, enabled=False)

    if not args.input.exists():
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        return 1

    text = args.input.read_text(errors="replace")
    try:
        document = parse_gcode(text, profile.parser)
    except Exception as exc:
        print(f"Could not interpret file: {exc}", file=sys.stderr)
        return 1

    travel = document.travel_segments()
    cutting = document.cutting_segments()
    print(f"{args.input.name}  [{profile.name}]")
    print(f"  Points: {document.total_points}")
    print(f"  Segments: {len(document.segments)} "
          f"({len(travel)} travel, {len(cutting)} cutting)")

    bounds = document.bounds
    if bounds is not None:
        lo, hi = bounds
        print(f"  Bounds: X {lo[0]:.4f}..{hi[0]:.4f}  "
              f"Y {lo[1]:.4f}..{hi[1]:.4f}  Z {lo[2]:.4f}..{hi[2]:.4f}")

    if args.z_levels:
        levels = document.normalized_z_levels()
        print(f"  Z levels: {len(levels)}")
        for z, norm in levels.items():
            print(f"    Z={z:.4f}  ({norm:.3f})")

    if lod.is_limited:
        rendered = sum(
            len(s.points)
            for is_travel in (True, False)
            for s in prepare_render_segments(document, is_travel, lod)
        )
        print(f"  Rendered points: {rendered} (budget {lod.max_points})")
    else:
        print("  Level of detail: off")

    if args.check:
        result = validate_document(document)
        for issue in result.issues:
            stream = sys.stderr if issue.severity == "error" else sys.stdout
            print(f"  {issue.severity.upper()}: {issue.message}", file=stream)
        if result.has_errors:
            return 1
        if result.is_ok:
            print("  Structure OK")

    return 0


if __name__ == "__main__":
    sys.exit(main())
