from scratchkit.minmax_list import INT_MAX, INT_MIN, MinMaxList


def _build(*values):
    lst = MinMaxList()
    for value in values:
        lst.insert(value)
    return lst


def test_empty_bounds():
    lst = MinMaxList()
    assert lst.min_val == INT_MAX == 2147483647
    assert lst.max_val == INT_MIN == -2147483648
    assert list(lst) == []


def test_insert_at_head_and_bounds():
    lst = _build(10, 20, 30, 6)
    assert list(lst) == [6, 30, 20, 10]
    assert lst.min_val == 6
    assert lst.max_val == 30


def test_delete_max_recomputes():
    lst = _build(10, 20, 30, 6)
    assert lst.delete(30) is True
    assert list(lst) == [6, 20, 10]
    assert lst.max_val == 20
    assert lst.min_val == 6


def test_delete_min_recomputes():
    lst = _build(10, 20, 30, 6)
    assert lst.delete(6) is True
    assert lst.min_val == 10
    assert lst.max_val == 30


def test_delete_missing():
    lst = _build(1, 2)
    assert lst.delete(5) is False
    assert list(lst) == [2, 1]


def test_delete_last_resets_bounds():
    lst = _build(4)
    assert lst.delete(4) is True
    assert lst.min_val == INT_MAX
    assert lst.max_val == INT_MIN
    assert len(lst) == 0


def test_reverse():
    lst = _build(10, 20, 30, 6)
    lst.delete(30)
    lst.reverse()
    assert list(lst) == [10, 20, 6]


def test_reverse_twice_is_identity():
    lst = _build(3, 1, 4, 1, 5)
    before = list(lst)
    lst.reverse()
    assert list(lst) == before[::-1]
    lst.reverse()
    assert list(lst) == before


def test_render():
    lst = _build(10, 20, 30, 6)
    assert lst.render() == "6 30 20 10 \nList min: 6 List max: 30"


def test_bounds_invariant():
    values = [7, -3, 12, 0, 12, -3]
    lst = _build(*values)
    for value in (12, -3, 7):
        lst.delete(value)
        remaining = list(lst)
        assert lst.min_val == min(remaining)
        assert lst.max_val == max(remaining)