# =============================================================================
# Unit Tests: Referential Index
# =============================================================================

from osmload.index import ReferentialIndex


def test_empty_index_has_nothing():
    index = ReferentialIndex()
    assert not index.has_point(1)
    assert not index.has_way(1)
    assert index.point_count == 0
    assert index.way_count == 0


def test_points_and_ways_are_separate_namespaces():
    index = ReferentialIndex()
    index.record_point(42)

    assert index.has_point(42)
    assert not index.has_way(42)


def test_membership_is_monotonic():
    """Once recorded, an ID stays present for the rest of the pass."""
    index = ReferentialIndex()
    index.record_point(7)
    for other in range(100, 200):
        index.record_point(other)
        index.record_way(other)
        assert index.has_point(7)


def test_recording_twice_is_idempotent():
    index = ReferentialIndex()
    index.record_way(5)
    index.record_way(5)
    assert index.way_count == 1


def test_has_all_points():
    index = ReferentialIndex()
    index.record_point(1)
    index.record_point(2)

    assert index.has_all_points([1, 2])
    assert index.has_all_points((2, 1, 2))
    assert not index.has_all_points([1, 99])


def test_has_all_points_vacuous_for_empty_refs():
    assert ReferentialIndex().has_all_points([])


def test_large_sparse_ids():
    index = ReferentialIndex()
    big = 2**62 + 17
    index.record_point(big)
    assert index.has_point(big)
    assert not index.has_point(big - 1)


def test_repr():
    index = ReferentialIndex()
    index.record_point(1)
    assert repr(index) == "ReferentialIndex(points=1, ways=0)"
