import pytest

from spatial_linkage.structures import ClusterArena, DisjointSet


def test_disjoint_set_union_reports_structural_merges():
    forest = DisjointSet(4)
    assert forest.union(0, 1)
    assert forest.union(2, 3)
    assert not forest.union(1, 0)
    assert forest.component_count == 2
    assert forest.union(1, 3)
    assert forest.component_count == 1
    assert len({forest.find(i) for i in range(4)}) == 1


def test_disjoint_set_union_by_rank_keeps_taller_root():
    forest = DisjointSet(3)
    forest.union(0, 1)
    assert forest.parent[1] == 0
    assert forest.rank[0] == 1
    forest.union(2, 1)
    assert forest.find(2) == 0
    assert forest.rank[0] == 1


def test_disjoint_set_rejects_unknown_index():
    forest = DisjointSet(2)
    with pytest.raises(ValueError):
        forest.find(2)
    with pytest.raises(ValueError):
        forest.union(-1, 0)


def test_disjoint_set_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_arena_merge_attach_and_union():
    arena = ClusterArena(5)
    first = arena.merge_as_new(0, 1)
    arena.attach(1, 2)
    second = arena.merge_as_new(3, 4)
    assert arena.clusters[first] == [0, 1, 2]
    assert arena.union_clusters(0, 3)
    assert arena.clusters[second] == []
    assert all(arena.cluster_of(i) == first for i in range(5))
    assert [len(group) for group in arena.groups()] == [5]


def test_arena_union_is_idempotent():
    arena = ClusterArena(4)
    arena.merge_as_new(0, 1)
    arena.merge_as_new(2, 3)
    assert arena.union_clusters(1, 2)
    assert not arena.union_clusters(1, 2)
    assert not arena.connect(0, 3)
    assert sorted(len(group) for group in arena.groups()) == [4]


def test_arena_materializes_untouched_points():
    arena = ClusterArena(4)
    arena.connect(1, 2)
    assert arena.materialize_singletons() == 2
    assert sorted(len(group) for group in arena.groups()) == [1, 1, 2]


def test_arena_enforces_merge_preconditions():
    arena = ClusterArena(3)
    arena.merge_as_new(0, 1)
    with pytest.raises(ValueError):
        arena.merge_as_new(1, 2)
    with pytest.raises(ValueError):
        arena.attach(2, 0)
    with pytest.raises(ValueError):
        arena.union_clusters(0, 2)
    with pytest.raises(ValueError):
        arena.connect(0, 3)
