"""Spatial linkage library initialization."""

from .distance import MAX_COORDINATE, distance_squared
from .edges import EdgeCatalog, build_catalog, build_edges, sort_edges
from .pipeline import (
    BoundedClusteringResult,
    LinkageConfig,
    LinkageStats,
    PointClusterer,
    bridge_x_product,
    cluster_bounded,
    find_bridging_edge,
    largest_cluster_product,
)
from .runner import LinkageReport, load_points, solve_file
from .structures import ClusterArena, DisjointSet, Edge, Point

__all__ = [
    "MAX_COORDINATE",
    "BoundedClusteringResult",
    "ClusterArena",
    "DisjointSet",
    "Edge",
    "EdgeCatalog",
    "LinkageConfig",
    "LinkageReport",
    "LinkageStats",
    "Point",
    "PointClusterer",
    "bridge_x_product",
    "build_catalog",
    "build_edges",
    "cluster_bounded",
    "distance_squared",
    "find_bridging_edge",
    "largest_cluster_product",
    "load_points",
    "solve_file",
    "sort_edges",
]
