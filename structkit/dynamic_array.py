from __future__ import annotations
import ctypes
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import EmptyCollectionError, IndexOutOfRangeError

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """A growable array backed by a raw ctypes buffer.

    Used as the per-bucket entry sequence of :class:`~structkit.HashMap`
    and as the dense backing store of :class:`~structkit.MinHeap`.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity grows geometrically (x2) when full and halves when a pop
      leaves the buffer at most a quarter full.
    • Negative indices are normalized (like built-in list semantics).
    • `swap_remove` gives O(1) removal when element order does not matter.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Initial allocated capacity; the buffer never shrinks below this.
    _INITIAL_CAPACITY = 4

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

        if it is not None:
            for v in it:
                self.append(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (max(capacity, 1) * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a fresh buffer of `new_capacity` slots."""
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def _shrink_if_sparse(self) -> None:
        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

    def _normalize_index(self, idx: int) -> int:
        """Map negative indices and validate bounds.

        Raises:
            IndexOutOfRangeError: if idx is not a valid position.
        """
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexOutOfRangeError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    def append(self, value: T) -> None:
        """Append `value` to the end. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last item.

        Raises:
            EmptyCollectionError: if the array is empty.
        """
        if self._size == 0:
            raise EmptyCollectionError("pop from empty array")
        self._size -= 1
        val = self._buf[self._size]
        self._buf[self._size] = None  # drop the reference
        self._shrink_if_sparse()
        return val  # type: ignore[return-value]

    def swap_remove(self, idx: int) -> T:
        """Remove and return the item at `idx` without preserving order. O(1).

        The last item is moved into the vacated slot.
        """
        i = self._normalize_index(idx)
        val = self._buf[i]
        last = self._size - 1
        self._buf[i] = self._buf[last]
        self._buf[last] = None
        self._size = last
        self._shrink_if_sparse()
        return val  # type: ignore[return-value]

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at positions `i` and `j`."""
        i = self._normalize_index(i)
        j = self._normalize_index(j)
        self._buf[i], self._buf[j] = self._buf[j], self._buf[i]

    def clear(self) -> None:
        """Remove all items and return to the initial capacity."""
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._normalize_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._normalize_index(idx)] = value

    def __contains__(self, value: object) -> bool:
        """Return True if `value` is present (linear scan)."""
        for i in range(self._size):
            item = self._buf[i]
            if item is value or item == value:
                return True
        return False

    def to_list(self) -> List[T]:
        """Copy the live items into a plain Python `list`."""
        return [self._buf[i] for i in range(self._size)]

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({self.to_list()!r})"
