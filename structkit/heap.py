from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .dynamic_array import DynamicArray
from .errors import EmptyCollectionError, InvalidArgumentError, TypeMismatchError

T = TypeVar("T")

# Three-way comparison: < 0 if a orders first, > 0 if b does, 0 if tied.
Comparator = Callable[[T, T], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``<`` operator.

    Raises:
        TypeMismatchError: if the values do not support ordering.
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError as exc:
        raise TypeMismatchError(
            f"cannot order {type(a).__name__!r} and {type(b).__name__!r}; supply a comparator"
        ) from exc
    return 0


class MinHeap(Generic[T]):
    """A binary min-heap over a :class:`DynamicArray`.

    The ordering is fixed at construction: the supplied `comparator`, or the
    elements' natural ``<`` ordering when none is given. Sifts decide where an
    element ends up before moving anything, so a failing comparison leaves
    the heap untouched.
    """

    __slots__ = ("_data", "_comparator", "_compare")

    def __init__(self, comparator: Optional[Comparator[T]] = None, it: Optional[Iterable[T]] = None) -> None:
        if comparator is not None and not callable(comparator):
            raise InvalidArgumentError(
                f"comparator must be callable, got {type(comparator).__name__!r}; pass elements as it=..."
            )
        self._data: DynamicArray[T] = DynamicArray()
        self._comparator = comparator
        self._compare: Comparator[T] = comparator if comparator is not None else natural_compare
        if it is not None:
            for v in it:
                self._data.append(v)
            self._heapify()  # Bulk build in O(n) instead of repeated adds

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _sift_up(self, idx: int, item: T) -> None:
        """Place `item` into the hole at `idx`, moving parents down as needed."""
        data = self._data
        compare = self._compare
        # Find the final slot first; only compare, never move.
        target = idx
        while target > 0:
            parent = (target - 1) // 2
            if compare(data[parent], item) <= 0:
                break
            target = parent
        while idx > target:
            parent = (idx - 1) // 2
            data[idx] = data[parent]
            idx = parent
        data[idx] = item

    def _sift_down(self, idx: int, item: T) -> None:
        """Place `item` into the hole at `idx`, moving smaller children up."""
        data = self._data
        compare = self._compare
        n = len(data)
        path: List[int] = []
        k = idx
        while True:
            left = 2 * k + 1
            if left >= n:
                break
            right = left + 1
            smaller = left
            if right < n and compare(data[right], data[left]) < 0:
                smaller = right
            if compare(data[smaller], item) >= 0:
                break
            path.append(smaller)
            k = smaller
        for child in path:
            data[idx] = data[child]
            idx = child
        data[idx] = item

    def _heapify(self) -> None:
        """Transform the backing array into a heap in-place in O(n) time."""
        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i, self._data[i])

    # -----------------------------
    # Public API
    # -----------------------------
    def add(self, value: T) -> None:
        """Add `value` to the heap (O(log n))."""
        data = self._data
        data.append(value)
        try:
            self._sift_up(len(data) - 1, value)
        except Exception:
            data.pop()
            raise

    def remove_min(self) -> T:
        """Remove and return the smallest item (O(log n)).

        Raises:
            EmptyCollectionError: if the heap is empty.
        """
        data = self._data
        if not data:
            raise EmptyCollectionError("remove_min from empty heap")
        top = data[0]
        last = data.pop()
        if not data:
            return top
        # The root is a hole for `last`; nothing moves until its slot is known.
        try:
            self._sift_down(0, last)
        except Exception:
            data.append(last)
            raise
        return top

    def get_min(self) -> T:
        """Return the smallest item without removing it (O(1)).

        Raises:
            EmptyCollectionError: if the heap is empty.
        """
        if not self._data:
            raise EmptyCollectionError("get_min on empty heap")
        return self._data[0]

    def contains(self, value: object) -> bool:
        """Linear scan using value equality."""
        return value in self._data

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    @property
    def comparator(self) -> Optional[Comparator[T]]:
        """The supplied comparator, or None when using natural order."""
        return self._comparator

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return bool(self._data)

    def to_list(self) -> List[T]:  # pragma: no cover - trivial
        return self._data.to_list()

    def __iter__(self) -> Iterator[T]:  # pragma: no cover - simple
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinHeap({self._data.to_list()!r})"
