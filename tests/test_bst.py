import pytest

from scratchkit.bst import BinarySearchTree

SKILL_TEST_INSERTS = [10, 15, 8, 7, 6, 9, 14, 20]


@pytest.fixture
def skill_tree():
    tree = BinarySearchTree()
    for value in SKILL_TEST_INSERTS:
        tree.insert(value)
    return tree


def test_in_order_from_skill_test(skill_tree):
    assert skill_tree.in_order() == [6, 7, 8, 9, 10, 14, 15, 20]


def test_pre_order_from_skill_test(skill_tree):
    assert skill_tree.pre_order() == [10, 8, 7, 6, 9, 15, 14, 20]


def test_post_order_from_skill_test(skill_tree):
    assert skill_tree.post_order() == [6, 7, 9, 8, 14, 20, 15, 10]


def test_len_counts_nodes(skill_tree):
    assert len(skill_tree) == len(SKILL_TEST_INSERTS)


def test_iter_matches_in_order(skill_tree):
    assert list(skill_tree) == skill_tree.in_order()


def test_balanced_example_in_order():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
    assert tree.in_order() == [20, 30, 40, 50, 60, 70, 80]
    assert len(tree) == 7


def test_duplicates_are_ignored():
    tree = BinarySearchTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1
    assert tree.in_order() == [5]


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert tree.in_order() == []
    assert tree.pre_order() == []
    assert tree.post_order() == []


def test_contains(skill_tree):
    assert 14 in skill_tree
    assert 11 not in skill_tree


def test_pre_order_starts_with_root_post_order_ends_with_root(skill_tree):
    assert skill_tree.pre_order()[0] == SKILL_TEST_INSERTS[0]
    assert skill_tree.post_order()[-1] == SKILL_TEST_INSERTS[0]