import pytest

from weighted_union_find import WeightedQuickUnionUF


def test_new_structure_is_all_singletons():
    uf = WeightedQuickUnionUF(5)
    assert uf.get_count() == 5
    for i in range(5):
        assert uf.find(i) == i
    assert not uf.connected(0, 1)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        WeightedQuickUnionUF(0)
    with pytest.raises(ValueError):
        WeightedQuickUnionUF(-3)


def test_union_connects_and_counts_components():
    uf = WeightedQuickUnionUF(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 4)
    assert uf.get_count() == 3

    # already connected, nothing changes
    uf.union(0, 3)
    assert uf.get_count() == 3


def test_tie_puts_second_tree_under_first_root():
    uf = WeightedQuickUnionUF(4)
    uf.union(2, 3)
    assert uf.find(3) == 2
    assert uf.size[2] == 2


def test_smaller_tree_goes_under_larger_root():
    uf = WeightedQuickUnionUF(5)
    uf.union(1, 2)
    uf.union(1, 3)
    # {1,2,3} is larger than {0}, so 0 joins under 1 even as first argument
    uf.union(0, 1)
    assert uf.find(0) == 1
    assert uf.size[1] == 4


def test_path_compression_keeps_roots():
    uf = WeightedQuickUnionUF(8)
    for a, b in ((0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (4, 6), (0, 4)):
        uf.union(a, b)
    roots_before = [uf.find(i) for i in range(8)]
    roots_after = [uf.find(i) for i in range(8)]
    assert roots_before == roots_after
    assert len(set(roots_after)) == 1
    assert uf.size[roots_after[0]] == 8


def test_out_of_range_index_raises():
    uf = WeightedQuickUnionUF(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.connected(-1, 0)
    with pytest.raises(IndexError):
        uf.union(0, 5)
