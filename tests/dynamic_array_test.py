import pytest

from structkit import DynamicArray, EmptyCollectionError, IndexOutOfRangeError


def test_get_valid_indices_matches_builtin_list_behavior():
    data = [10, 20, 30, 40]
    arr = DynamicArray(data)
    for i in range(-len(data), len(data)):
        assert arr[i] == data[i]


@pytest.mark.parametrize("i", [4, -5, 100])
def test_out_of_range_access_raises(i):
    arr = DynamicArray([1, 2, 3, 4])
    with pytest.raises(IndexOutOfRangeError):
        arr[i]
    with pytest.raises(IndexError):
        arr[i] = 0


def test_append_grows_capacity_by_doubling():
    arr = DynamicArray()
    assert arr.capacity() == 4
    for i in range(5):
        arr.append(i)
    assert arr.capacity() == 8
    assert arr.to_list() == [0, 1, 2, 3, 4]


def test_pop_returns_last_and_shrinks_when_sparse():
    arr = DynamicArray(range(17))
    assert arr.capacity() == 32
    while len(arr) > 2:
        arr.pop()
    assert arr.capacity() < 32
    assert arr.to_list() == [0, 1]


def test_pop_from_empty_raises():
    with pytest.raises(EmptyCollectionError):
        DynamicArray().pop()


def test_swap_remove_moves_last_into_hole():
    arr = DynamicArray(["a", "b", "c", "d"])
    assert arr.swap_remove(1) == "b"
    assert arr.to_list() == ["a", "d", "c"]
    assert arr.swap_remove(-1) == "c"
    assert arr.to_list() == ["a", "d"]


def test_swap_and_setitem():
    arr = DynamicArray([1, 2, 3])
    arr.swap(0, 2)
    arr[1] = 20
    assert arr.to_list() == [3, 20, 1]


def test_none_is_storable():
    arr = DynamicArray([None, 1])
    assert arr[0] is None
    assert None in arr


def test_clear_resets():
    arr = DynamicArray(range(10))
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity() == 4
    assert list(arr) == []


def test_contains_checks_identity_before_equality():
    n = float("nan")
    arr = DynamicArray([1, n])
    assert n in arr
    assert float("nan") not in arr
