"""Command line entry point for the spatial linkage engine."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import LinkageConfig
from .runner import solve_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cluster 3D points nearest-first and find the final MST bridge.")
    parser.add_argument("input", type=Path, help="Path to a file with one 'x,y,z' point per line")
    parser.add_argument(
        "--connections",
        type=int,
        default=int(os.getenv("LINKAGE_CONNECTIONS", "1000")),
        help="Number of shortest edges to apply for bounded clustering (default: 1000)",
    )
    parser.add_argument(
        "--largest",
        type=int,
        default=3,
        help="How many of the largest cluster sizes to multiply (default: 3)",
    )
    parser.add_argument("--output", type=Path, help="Optional CSV path for per-point cluster assignments")
    parser.add_argument("--progress", action="store_true", help="Show tqdm progress bars while merging")
    parser.add_argument("--quiet", action="store_true", help="Only print the two answers")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = LinkageConfig(
        connections=args.connections,
        largest=args.largest,
        use_tqdm=args.progress,
        verbose=not args.quiet,
    )

    report = solve_file(args.input, config, args.output)
    if report is None:
        return 1
    print(f"Part 1: {report.largest_product}")
    print(f"Part 2: {report.bridge_product if report.bridge_product is not None else 'n/a'}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
