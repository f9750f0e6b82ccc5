"""Single-linkage clustering and MST bridging over 3D points."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from .edges import EdgeCatalog, build_catalog
from .structures import ClusterArena, DisjointSet, Edge, Point


@dataclass
class LinkageStats:
    """Summary metrics for one clustering run."""

    total_points: int
    candidate_edges: int
    edges_applied: int
    structural_merges: int
    redundant_edges: int
    cluster_count: int
    runtime_seconds: float


@dataclass
class BoundedClusteringResult:
    """Partition produced by applying the K shortest edges."""

    points: Sequence[Point]
    clusters: List[List[int]]
    stats: LinkageStats

    @property
    def sizes(self) -> List[int]:
        return [len(members) for members in self.clusters]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per input point with its cluster id and cluster size."""

        rows = []
        for cluster_id, members in enumerate(self.clusters):
            for index in members:
                point = self.points[index]
                rows.append(
                    {
                        "index": index,
                        "x": point.x,
                        "y": point.y,
                        "z": point.z,
                        "cluster_id": cluster_id,
                        "cluster_size": len(members),
                    }
                )
        frame = pd.DataFrame(rows, columns=["index", "x", "y", "z", "cluster_id", "cluster_size"])
        return frame.sort_values("index").reset_index(drop=True)


@dataclass
class LinkageConfig:
    """Configuration parameters for :class:PointClusterer."""

    connections: int = 1000
    largest: int = 3
    use_tqdm: bool = False
    verbose: bool = True


class PointClusterer:
    """Merge points nearest-first under squared Euclidean distance."""

    def __init__(self, config: LinkageConfig | None = None) -> None:
        self.config = config or LinkageConfig()

    def cluster_bounded(self, points: Sequence[Point], k: int | None = None) -> BoundedClusteringResult:
        """Apply the `k` shortest edges and return the resulting partition."""

        k = self.config.connections if k is None else k
        if k < 0:
            raise ValueError(f"number of connections must be non-negative, got {k}")

        verbose = self.config.verbose
        start = time.time()
        catalog = self._catalog(points)

        t0 = time.time()
        limit = min(k, len(catalog))
        if verbose:
            print(f"2. Applying the {limit} shortest of {len(catalog)} edges...")
        arena = ClusterArena(len(catalog.points))
        merges = 0
        for edge in self._progress(catalog.edges(limit), limit, "   Connecting"):
            if arena.connect(edge.left, edge.right):
                merges += 1
        singletons = arena.materialize_singletons()
        clusters = list(arena.groups())
        if verbose:
            print(f"   {merges} merges, {singletons} untouched points. Done in {time.time() - t0:.2f}s")

        stats = LinkageStats(
            total_points=len(catalog.points),
            candidate_edges=len(catalog),
            edges_applied=limit,
            structural_merges=merges,
            redundant_edges=limit - merges,
            cluster_count=len(clusters),
            runtime_seconds=time.time() - start,
        )
        if verbose:
            print(f"   Found {stats.cluster_count} clusters in {stats.runtime_seconds:.2f}s")
        return BoundedClusteringResult(points=catalog.points, clusters=clusters, stats=stats)

    def find_bridging_edge(self, points: Sequence[Point]) -> Optional[Edge]:
        """Return the Kruskal edge that joins the last two components, or None."""

        if len(points) < 2:
            return None

        verbose = self.config.verbose
        catalog = self._catalog(points)

        t0 = time.time()
        if verbose:
            print("2. Running Kruskal until one component remains...")
        forest = DisjointSet(len(catalog.points))
        last_edge: Optional[Edge] = None
        examined = 0
        for edge in self._progress(catalog.edges(), len(catalog), "   Spanning"):
            examined += 1
            if not forest.union(edge.left, edge.right):
                continue
            last_edge = edge
            if forest.component_count == 1:
                break
        if verbose:
            print(f"   Connected after {examined} edges. Done in {time.time() - t0:.2f}s")
        return last_edge

    def _catalog(self, points: Sequence[Point]) -> EdgeCatalog:
        t0 = time.time()
        if self.config.verbose:
            print(f"1. Building candidate edges for {len(points)} points...")
        catalog = build_catalog(points)
        if self.config.verbose:
            print(f"   {len(catalog)} edges sorted. Done in {time.time() - t0:.2f}s")
        return catalog

    def _progress(self, iterable: Iterable[Edge], total: int, desc: str) -> Iterable[Edge]:
        if self.config.use_tqdm and total:
            return tqdm(iterable, total=total, desc=desc, unit="edge")
        return iterable


def cluster_bounded(points: Sequence[Point], k: int) -> List[int]:
    """Return the cluster sizes left after applying the `k` shortest edges."""

    clusterer = PointClusterer(LinkageConfig(verbose=False))
    return clusterer.cluster_bounded(points, k).sizes


def find_bridging_edge(points: Sequence[Point]) -> Optional[Edge]:
    """Return the edge that finally connects all points, or None for < 2 points."""

    clusterer = PointClusterer(LinkageConfig(verbose=False))
    return clusterer.find_bridging_edge(points)


def largest_cluster_product(sizes: Iterable[int], count: int = 3) -> int:
    """Multiply the `count` largest cluster sizes."""

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return math.prod(sorted(sizes, reverse=True)[:count])


def bridge_x_product(edge: Edge) -> int:
    return edge.u.x * edge.v.x


__all__ = [
    "BoundedClusteringResult",
    "LinkageConfig",
    "LinkageStats",
    "PointClusterer",
    "bridge_x_product",
    "cluster_bounded",
    "find_bridging_edge",
    "largest_cluster_product",
]
