import pytest

from pixelproc.union_find import DisjointSetForest


def test_trees():
    forest = DisjointSetForest.from_parents(
        [1, 3, 1, 3, 4, 4, 5, 4],
        [1, 3, 1, 4, 4, 2, 1, 1],
    )
    assert forest.trees() == [[0, 1, 2, 3], [4, 5, 6, 7]]


def test_union_find_sequence():
    forest = DisjointSetForest(6)
    assert forest.parent == [0, 1, 2, 3, 4, 5]
    assert forest.num_trees() == 6

    forest.union(0, 4)
    assert forest.parent == [0, 1, 2, 3, 0, 5]
    assert forest.num_trees() == 5

    forest.union(1, 3)
    assert forest.parent == [0, 1, 2, 1, 0, 5]
    assert forest.num_trees() == 4

    forest.union(3, 2)
    assert forest.parent == [0, 1, 1, 1, 0, 5]
    assert forest.num_trees() == 3

    forest.union(2, 4)
    assert forest.parent == [1, 1, 1, 1, 0, 5]
    assert forest.num_trees() == 2


def test_find_reports_membership():
    forest = DisjointSetForest(4)
    forest.union(0, 2)
    assert forest.find(0, 2)
    assert forest.find(2, 0)
    assert not forest.find(0, 1)


def test_union_of_same_tree_is_noop():
    forest = DisjointSetForest(3)
    forest.union(0, 1)
    forest.union(1, 0)
    assert forest.num_trees() == 2
    assert forest.trees() == [[0, 1], [2]]


def test_root_out_of_range():
    forest = DisjointSetForest(3)
    with pytest.raises(IndexError):
        forest.root(3)


def test_union_out_of_range():
    forest = DisjointSetForest(3)
    with pytest.raises(IndexError):
        forest.union(0, 5)


def test_from_parents_rejects_length_mismatch():
    with pytest.raises(ValueError):
        DisjointSetForest.from_parents([0, 1], [1])