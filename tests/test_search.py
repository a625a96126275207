import pytest

from scratchkit.search import binsearch, insertion_sort, sort_strings

SORTED = [1, 4, 6, 13, 22, 51, 71]


def test_binsearch_finds_target():
    assert binsearch(SORTED, 22) == SORTED.index(22)


@pytest.mark.parametrize("target", SORTED)
def test_binsearch_finds_every_element(target):
    assert SORTED[binsearch(SORTED, target)] == target


@pytest.mark.parametrize("target", [0, 5, 23, 100])
def test_binsearch_missing_returns_minus_one(target):
    assert binsearch(SORTED, target) == -1


def test_binsearch_empty():
    assert binsearch([], 3) == -1


def test_binsearch_respects_bounds():
    assert binsearch(SORTED, 1, 1, len(SORTED) - 1) == -1
    assert binsearch(SORTED, 51, 0, 3) == -1
    assert binsearch(SORTED, 13, 2, 4) == SORTED.index(13)


def test_insertion_sort_matches_sorted():
    unsorted = [3, 5, 1, 23, 16, 4]
    assert insertion_sort(unsorted) == sorted(unsorted)


def test_insertion_sort_does_not_modify_input():
    unsorted = [3, 5, 1, 23, 16, 4]
    copy = list(unsorted)
    insertion_sort(unsorted)
    assert unsorted == copy


def test_insertion_sort_with_duplicates_and_empty():
    assert insertion_sort([]) == []
    data = [2, 2, -1, 0, 2, -1]
    assert insertion_sort(data) == sorted(data)


def test_sort_strings():
    fruits = ["orange", "lemon", "apple", "grape"]
    result = sort_strings(fruits)
    assert result == sorted(fruits)
    assert result[0] == "apple"


def test_sort_strings_is_bytewise_case_sensitive():
    words = ["banana", "Apple", "apple"]
    result = sort_strings(words)
    assert result.index("Apple") < result.index("apple")