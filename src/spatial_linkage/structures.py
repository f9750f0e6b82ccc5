"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional


class Point(NamedTuple):
    """Immutable point in 3D integer space."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Edge:
    """Candidate connection between the input points at `left` and `right`."""

    u: Point
    v: Point
    dist: int
    left: int
    right: int


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union by rank."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.rank = [0] * self.size
        self.component_count = self.size

    def find(self, index: int) -> int:
        self._check(index)
        parent = self.parent[index]
        if parent != index:
            parent = self.find(parent)
            self.parent[index] = parent
        return parent

    def union(self, left: int, right: int) -> bool:
        """Merge the components of `left` and `right`; False if already joined."""

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self.rank[root_left] < self.rank[root_right]:
            self.parent[root_left] = root_right
        elif self.rank[root_left] > self.rank[root_right]:
            self.parent[root_right] = root_left
        else:
            self.parent[root_right] = root_left
            self.rank[root_left] += 1
        self.component_count -= 1
        return True

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise ValueError(f"index {index} is outside 0..{self.size - 1}")


@dataclass
class ClusterArena:
    """Clusters stored in an arena; each point holds the index of its cluster.

    Points that no edge has touched yet are unassigned (``None``). Absorbed
    clusters stay in the arena as empty lists so cluster ids remain stable.
    """

    size: int
    clusters: List[List[int]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.owner: List[Optional[int]] = [None] * self.size

    def cluster_of(self, index: int) -> Optional[int]:
        self._check(index)
        return self.owner[index]

    def is_assigned(self, index: int) -> bool:
        return self.cluster_of(index) is not None

    def merge_as_new(self, left: int, right: int) -> int:
        """Open a new cluster holding exactly `left` and `right`."""

        if self.is_assigned(left) or self.is_assigned(right):
            raise ValueError(f"points {left} and {right} must both be unassigned")
        cluster_id = len(self.clusters)
        self.clusters.append([left, right] if left != right else [left])
        self.owner[left] = cluster_id
        self.owner[right] = cluster_id
        return cluster_id

    def attach(self, member: int, newcomer: int) -> int:
        """Add the unassigned `newcomer` to the cluster containing `member`."""

        cluster_id = self.cluster_of(member)
        if cluster_id is None:
            raise ValueError(f"point {member} does not belong to a cluster")
        if self.is_assigned(newcomer):
            raise ValueError(f"point {newcomer} already belongs to a cluster")
        self.clusters[cluster_id].append(newcomer)
        self.owner[newcomer] = cluster_id
        return cluster_id

    def union_clusters(self, left: int, right: int) -> bool:
        """Move every member of `right`'s cluster into `left`'s cluster.

        Returns False without changes when both already share a cluster.
        """

        target = self.cluster_of(left)
        source = self.cluster_of(right)
        if target is None or source is None:
            raise ValueError(f"points {left} and {right} must both belong to clusters")
        if target == source:
            return False
        moved = self.clusters[source]
        self.clusters[source] = []
        for index in moved:
            self.owner[index] = target
        self.clusters[target].extend(moved)
        return True

    def connect(self, left: int, right: int) -> bool:
        """Apply one edge, choosing the merge operation from current assignment.

        Returns True when the edge joined two previously separate groups.
        """

        left_in = self.is_assigned(left)
        right_in = self.is_assigned(right)
        if not left_in and not right_in:
            self.merge_as_new(left, right)
            return left != right
        if left_in and not right_in:
            self.attach(left, right)
            return True
        if right_in and not left_in:
            self.attach(right, left)
            return True
        return self.union_clusters(left, right)

    def materialize_singletons(self) -> int:
        """Give every unassigned point its own cluster; return how many were made."""

        created = 0
        for index, cluster_id in enumerate(self.owner):
            if cluster_id is None:
                self.owner[index] = len(self.clusters)
                self.clusters.append([index])
                created += 1
        return created

    def groups(self) -> Iterator[List[int]]:
        """Yield the non-empty clusters in creation order."""

        for members in self.clusters:
            if members:
                yield members

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise ValueError(f"index {index} is outside 0..{self.size - 1}")
