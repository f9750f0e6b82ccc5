"""Candidate edge generation over all point pairs."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, List, Sequence

import numpy as np

from .distance import check_coordinates, distance_squared
from .structures import Edge, Point


def build_edges(points: Sequence[Point]) -> List[Edge]:
    """Return one edge per unordered pair, in ``i < j`` enumeration order.

    Reference form of the catalog; the algorithms use :func:`build_catalog`,
    which yields the same edges in the same sorted order.
    """

    check_coordinates(points)
    return [
        Edge(u=points[left], v=points[right], dist=distance_squared(points[left], points[right]), left=left, right=right)
        for left, right in itertools.combinations(range(len(points)), 2)
    ]


def sort_edges(edges: Sequence[Edge]) -> List[Edge]:
    """Sort ascending by distance; equal distances keep their enumeration order."""

    return sorted(edges, key=lambda edge: edge.dist)


@dataclass
class EdgeCatalog:
    """All pairwise edges of a point set, sorted ascending by squared distance.

    Stored column-wise: ``left[k]``, ``right[k]`` are input indices and
    ``dist[k]`` is their squared distance, for the k-th shortest edge.
    """

    points: Sequence[Point]
    left: np.ndarray
    right: np.ndarray
    dist: np.ndarray

    def __len__(self) -> int:
        return int(self.dist.shape[0])

    def __iter__(self) -> Iterator[Edge]:
        return self.edges()

    def edges(self, limit: int | None = None) -> Iterator[Edge]:
        """Yield edges in sorted order, stopping after `limit` if given."""

        stop = len(self) if limit is None else min(limit, len(self))
        for position in range(stop):
            left = int(self.left[position])
            right = int(self.right[position])
            yield Edge(
                u=self.points[left],
                v=self.points[right],
                dist=int(self.dist[position]),
                left=left,
                right=right,
            )


def build_catalog(points: Sequence[Point]) -> EdgeCatalog:
    """Compute and stably sort every pairwise distance in one vectorised pass."""

    points = list(points)
    check_coordinates(points)
    coords = np.asarray(points, dtype=np.int64).reshape(-1, 3)
    # Row-major upper triangle matches the i < j enumeration of build_edges.
    left, right = np.triu_indices(len(points), k=1)
    deltas = coords[left] - coords[right]
    dist = np.einsum("ij,ij->i", deltas, deltas)
    order = np.argsort(dist, kind="stable")
    return EdgeCatalog(points=points, left=left[order], right=right[order], dist=dist[order])


__all__ = ["EdgeCatalog", "build_catalog", "build_edges", "sort_edges"]
