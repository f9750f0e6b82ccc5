"""Convenience helpers for running the linkage engine end-to-end."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .pipeline import (
    BoundedClusteringResult,
    LinkageConfig,
    PointClusterer,
    bridge_x_product,
    largest_cluster_product,
)
from .structures import Edge, Point


@dataclass
class LinkageReport:
    """Both puzzle answers plus the data they were derived from."""

    clustering: BoundedClusteringResult
    largest_product: int
    bridge: Optional[Edge]
    bridge_product: Optional[int]


def load_points(path: str | Path) -> List[Point]:
    """Read one comma-separated ``x,y,z`` triple per line."""

    # Blank lines are kept as all-NaN rows so the index tracks file line numbers.
    frame = pd.read_csv(path, header=None, dtype=str, skip_blank_lines=False).dropna(how="all")
    if frame.shape[1] != 3:
        raise ValueError("every line must hold exactly three comma-separated integers")
    incomplete = frame.index[frame.isna().any(axis=1)]
    if len(incomplete):
        raise ValueError(f"line {incomplete[0] + 1}: expected three comma-separated integers")
    points = []
    for line_no, x, y, z in frame.itertuples(index=True):
        line_no += 1
        try:
            points.append(Point(int(x), int(y), int(z)))
        except ValueError as exc:
            raise ValueError(f"line {line_no}: {exc}") from exc
    return points


def solve_file(
    input_path: str | Path,
    config: Optional[LinkageConfig] = None,
    output_path: str | Path | None = None,
) -> LinkageReport | None:
    """Run both algorithms on `input_path` and optionally export cluster assignments."""

    input_path = Path(input_path)
    config = config or LinkageConfig()
    if config.largest < 0:
        print(f"ERROR: Number of largest clusters must be non-negative, got {config.largest}")
        return None
    if output_path is not None:
        output_path = Path(output_path)
        if output_path.suffix.lower() not in _OUTPUT_FORMATS:
            print(f"ERROR: Unsupported output file format: '{output_path.suffix.lower()}'")
            return None

    try:
        points = load_points(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except pd.errors.EmptyDataError:
        points = []
    except ValueError as exc:
        print(f"ERROR: Malformed input in '{input_path}': {exc}")
        return None

    clusterer = PointClusterer(config)
    try:
        clustering = clusterer.cluster_bounded(points)
        bridge = clusterer.find_bridging_edge(points)
    except (OverflowError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None

    report = LinkageReport(
        clustering=clustering,
        largest_product=largest_cluster_product(clustering.sizes, config.largest),
        bridge=bridge,
        bridge_product=bridge_x_product(bridge) if bridge is not None else None,
    )

    if config.verbose:
        print("\n--- Results Summary ---")
        print(f"   - Points: {len(points)}")
        print(f"   - Clusters after {clustering.stats.edges_applied} connections: {clustering.stats.cluster_count}")
        print(f"   - Product of {config.largest} largest cluster sizes: {report.largest_product}")
        if bridge is None:
            print("   - Bridging edge: none (fewer than two points)")
        else:
            print(f"   - Bridging edge: {tuple(bridge.u)} <-> {tuple(bridge.v)}, x product {report.bridge_product}")

    if output_path is not None:
        _save_dataframe(clustering.to_dataframe(), output_path)
        if config.verbose:
            print(f"\n   Cluster assignments saved to '{output_path}'")

    return report


_OUTPUT_FORMATS = {".csv"}


def _save_dataframe(dataframe: pd.DataFrame, output_path: Path) -> None:
    suffix = output_path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(output_path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
