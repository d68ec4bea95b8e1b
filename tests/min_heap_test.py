import random

import pytest

from structkit import EmptyCollectionError, InvalidArgumentError, MinHeap, TypeMismatchError


def check_heap_order(heap, compare=None):
    data = heap.to_list()
    for k in range(1, len(data)):
        parent = (k - 1) // 2
        if compare is None:
            assert not data[k] < data[parent]
        else:
            assert compare(data[parent], data[k]) <= 0


def test_remove_min_scenario():
    h = MinHeap()
    for v in (5, 3, 8, 1):
        h.add(v)
    assert [h.remove_min(), h.remove_min(), h.remove_min()] == [1, 3, 5]
    assert h.size() == 1
    assert h.get_min() == 8


def test_get_min_does_not_remove():
    h = MinHeap(it=[4, 2, 6])
    assert h.get_min() == 2
    assert h.get_min() == 2
    assert len(h) == 3


def test_empty_heap_raises():
    h = MinHeap()
    assert h.is_empty()
    with pytest.raises(EmptyCollectionError):
        h.remove_min()
    with pytest.raises(EmptyCollectionError):
        h.get_min()
    with pytest.raises(IndexError):
        h.get_min()


def test_contains_uses_equality():
    h = MinHeap(it=[3, 1, 2])
    assert h.contains(2)
    assert 1.0 in h
    assert not h.contains(7)


def test_comparator_reverses_order():
    h = MinHeap(comparator=lambda a, b: b - a)
    for v in (2, 9, 4, 7):
        h.add(v)
    assert [h.remove_min() for _ in range(4)] == [9, 7, 4, 2]


def test_comparator_orders_unorderable_values():
    h = MinHeap(comparator=lambda a, b: len(a) - len(b))
    for v in ({"a", "b", "c"}, {"a"}, {"x", "y"}):
        h.add(v)
    assert h.remove_min() == {"a"}
    assert h.comparator is not None


def test_natural_order_on_unorderable_values_raises_type_mismatch():
    h = MinHeap()
    h.add({"a"})
    with pytest.raises(TypeMismatchError):
        h.add(object())
    assert h.size() == 1


def test_mixed_types_fail_without_mutating():
    h = MinHeap(it=[1, 5, 3, 7])
    before = h.to_list()
    with pytest.raises(TypeMismatchError):
        h.add("text")
    assert h.to_list() == before
    with pytest.raises(TypeError):
        h.add(None)
    assert h.to_list() == before


def test_failing_comparator_propagates_and_leaves_heap_intact():
    calls = {"n": 0, "fail_after": None}

    def flaky(a, b):
        calls["n"] += 1
        if calls["fail_after"] is not None and calls["n"] > calls["fail_after"]:
            raise RuntimeError("boom")
        return a - b

    h = MinHeap(comparator=flaky)
    for v in (8, 3, 6, 1, 9, 4):
        h.add(v)
    before = h.to_list()
    calls["n"] = 0
    calls["fail_after"] = 1
    with pytest.raises(RuntimeError):
        h.remove_min()
    assert h.to_list() == before
    calls["n"] = 0
    with pytest.raises(RuntimeError):
        h.add(0)
    assert h.to_list() == before


def test_bulk_build_heapifies():
    data = [9, 4, 7, 1, 8, 2, 6, 3, 5]
    h = MinHeap(it=data)
    check_heap_order(h)
    assert [h.remove_min() for _ in data] == sorted(data)


def test_ties_are_all_returned():
    h = MinHeap(it=[2, 1, 2, 1, 2])
    assert [h.remove_min() for _ in range(5)] == [1, 1, 2, 2, 2]


def test_random_add_remove_is_non_decreasing():
    rng = random.Random(99)
    h = MinHeap()
    added = removed = 0
    last = None
    for _ in range(2000):
        if h.is_empty() or rng.random() < 0.55:
            h.add(rng.randint(-100, 100))
            added += 1
            last = None
        else:
            v = h.remove_min()
            removed += 1
            if last is not None:
                assert v >= last
            last = v
        assert h.size() == added - removed
        check_heap_order(h)
    drained = [h.remove_min() for _ in range(h.size())]
    assert drained == sorted(drained)


def test_heap_sort_with_comparator_on_tuples():
    rng = random.Random(5)
    pairs = [(rng.randint(0, 5), i) for i in range(50)]
    by_first = lambda a, b: a[0] - b[0]
    h = MinHeap(comparator=by_first)
    for p in pairs:
        h.add(p)
        check_heap_order(h, by_first)
    firsts = [h.remove_min()[0] for _ in pairs]
    assert firsts == sorted(firsts)


def test_non_callable_comparator_is_rejected():
    with pytest.raises(InvalidArgumentError):
        MinHeap([3, 1])


def test_contains_matches_nan_by_identity():
    n = float("nan")
    h = MinHeap(comparator=lambda a, b: 0)
    h.add(n)
    assert h.contains(n)
