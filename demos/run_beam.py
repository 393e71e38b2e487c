# File: demos/run_beam.py
"""
Solve one beam from the command line and print reactions and extrema.

Examples:
  python demos/run_beam.py
      (default 190x45 MGP10 joist, pinned at 0, roller at 1500, 1.5 kN/m)

  python demos/run_beam.py --span 3000 --support 0:fixed --point 3000:2
      (3 m cantilever with a 2 kN tip load)

  python demos/run_beam.py --support 0:pinned --support 2000:roller \
      --udl 0:2000:1.5 --csv artifacts/diagrams.csv
"""

import argparse
import logging
import os
import sys

from mini_beam import (
    BeamError,
    BeamModel,
    DistributedLoad,
    PointLoad,
    Section,
    SolverConfig,
    Support,
    normalize_model,
    solve_beam,
)
from mini_beam.catalog import DEFAULT_MODEL
from mini_beam.config import DEFAULTS


def parse_support(text: str) -> Support:
    position, _, kind = text.partition(":")
    return Support(float(position), kind or "pinned")


def parse_point(text: str) -> PointLoad:
    position, magnitude = text.split(":")
    return PointLoad(float(position), float(magnitude))


def parse_udl(text: str) -> DistributedLoad:
    start, end, intensity = text.split(":")
    return DistributedLoad(float(start), float(end), float(intensity))


def build_model(args) -> BeamModel:
    if not (args.support or args.point or args.udl):
        return DEFAULT_MODEL
    return BeamModel(
        span=args.span,
        E=args.E,
        section=Section(args.width, args.depth),
        supports=[parse_support(s) for s in args.support],
        point_loads=[parse_point(p) for p in args.point],
        distributed_loads=[parse_udl(u) for u in args.udl],
    )


def main():
    parser = argparse.ArgumentParser(
        description='Static analysis of a prismatic beam',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('--span', type=float, default=DEFAULTS.span, help='Span (mm)')
    parser.add_argument('--E', type=float, default=DEFAULTS.E, help='Elastic modulus (MPa)')
    parser.add_argument('--width', type=float, default=DEFAULTS.section_width, help='Section width (mm)')
    parser.add_argument('--depth', type=float, default=DEFAULTS.section_depth, help='Section depth (mm)')
    parser.add_argument('--support', action='append', default=[], metavar='X:TYPE',
                        help='Support at X mm, TYPE in fixed/pinned/roller/free (repeatable)')
    parser.add_argument('--point', action='append', default=[], metavar='X:P',
                        help='Point load P kN at X mm, downward positive (repeatable)')
    parser.add_argument('--udl', action='append', default=[], metavar='A:B:W',
                        help='Uniform load W kN/m from A to B mm (repeatable)')
    parser.add_argument('--samples', type=int, default=80, help='Samples per element')
    parser.add_argument('--no-normalize', action='store_true',
                        help='Reject out-of-range positions instead of clamping them')
    parser.add_argument('--csv', default=None, help='Write diagram samples to this CSV file')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        model = build_model(args)
        if not args.no_normalize:
            model = normalize_model(model)
        result = solve_beam(model, SolverConfig(sample_count=args.samples))
    except (BeamError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("Beam Analysis")
    print("=" * 60)
    print(f"  Span: {model.span:.0f} mm   E: {model.E:.0f} MPa   "
          f"Section: {model.section.width:.0f} x {model.section.depth:.0f} mm")
    print(f"  I: {model.I:.4e} mm^4   Nodes: {list(result.node_positions)}")

    print("\nReactions:")
    for r in result.support_reactions:
        line = f"  {r.type.value:>6} @ {r.position:8.1f} mm: {r.force:9.3f} kN"
        if r.moment:
            line += f"   {r.moment:9.4f} kN.m"
        print(line)

    print("\nExtrema:")
    for name, unit, ext in (
        ("Shear", "kN", result.shear),
        ("Moment", "kN.m", result.moment),
        ("Deflection", "mm", result.deflection),
    ):
        print(f"  {name:<10} min {ext.min:10.4f} {unit} @ {ext.min_x:7.1f} mm   "
              f"max {ext.max:10.4f} {unit} @ {ext.max_x:7.1f} mm")

    if args.csv:
        folder = os.path.dirname(args.csv)
        if folder:
            os.makedirs(folder, exist_ok=True)
        result.to_frame().to_csv(args.csv, index=False)
        print(f"\nWrote {len(result.samples)} samples to {args.csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
