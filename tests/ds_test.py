from structkit import DynamicArray, HashMap, LinkedList, MinHeap


def test_hash_map_set_get_resize():
    m = HashMap(initial_capacity=4, threshold=0.75)
    for i in range(50):
        m.put(f"k{i}", i)
    for i in range(50):
        assert m.get(f"k{i}") == i
    assert len(m) == 50
    assert m.buckets() >= 64


def test_hash_map_remove():
    m = HashMap()
    m.put("a", 1)
    assert m.remove("a") == 1
    assert m.get("a") is None
    assert m.remove("a") is None


def test_linked_list_round_trip():
    lst = LinkedList()
    for v in "abc":
        lst.add_last(v)
    assert "".join(lst) == "abc"
    assert lst == LinkedList("abc")


def test_heap_add_remove_get_min():
    h = MinHeap(it=[5, 2, 9, 1])
    assert h.get_min() == 1
    assert h.remove_min() == 1
    assert h.remove_min() == 2
    h.add(0)
    assert h.get_min() == 0
    assert len(h) == 3


def test_dynamic_array_iterates_in_order():
    assert list(DynamicArray("xyz")) == ["x", "y", "z"]
