from __future__ import annotations
import logging
import math
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .dynamic_array import DynamicArray
from .errors import InvalidArgumentError, NullKeyError

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")

logger = logging.getLogger(__name__)

# Fibonacci hashing multiplier, (sqrt(5) - 1) / 2.
HASH_MULT = (math.sqrt(5) - 1) / 2

_MASK_32 = 0xFFFFFFFF


def bucket_index(key: object, num_buckets: int) -> int:
    """Return the bucket for `key` in a table of `num_buckets` buckets.

    Python's 64-bit ``hash()`` is folded to 32 unsigned bits so that the
    product with ``HASH_MULT`` keeps enough fractional bits in a float.
    The result is ``floor(num_buckets * frac(h * HASH_MULT))``, which spreads
    small or sequential hash codes across the table for any bucket count.
    """
    h = hash(key)
    h = (h ^ (h >> 32)) & _MASK_32
    x = h * HASH_MULT
    idx = int(num_buckets * (x - math.floor(x)))
    # m * frac can round up to m for very large tables
    return min(idx, num_buckets - 1)


class Entry(Generic[K, V]):
    """A stored (key, value) pair. The key is fixed, the value is mutable."""

    __slots__ = ("_key", "value")

    def __init__(self, key: K, value: V) -> None:
        self._key = key
        self.value = value

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self._key!r}, {self.value!r})"


_Bucket = Optional[DynamicArray[Entry[K, V]]]


class HashMap(Generic[K, V]):
    """A separate-chaining hash table with Fibonacci-hashed buckets.

    • Buckets are created lazily; each is a :class:`DynamicArray` of
      :class:`Entry` objects in no particular order.
    • After a new key is added, if ``size / buckets`` is strictly greater than
      ``threshold`` the bucket count doubles and every entry is moved into a
      freshly built table, which then replaces the old one in one step.
    • The table never shrinks.
    • ``None`` is rejected as a key but allowed as a value; use
      :meth:`contains_key` or :meth:`get_entry` to tell a stored ``None``
      apart from a missing key.

    Not thread-safe.
    """

    __slots__ = ("_threshold", "_table", "_size")

    def __init__(self, initial_capacity: int = 10, threshold: float = 0.75) -> None:
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int) or initial_capacity < 1:
            raise InvalidArgumentError("initial_capacity must be a positive integer")
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise InvalidArgumentError("threshold must be a number")
        if not math.isfinite(threshold) or threshold <= 0:
            raise InvalidArgumentError("threshold must be a finite number > 0")
        self._threshold: float = float(threshold)
        self._table: List[_Bucket] = [None] * initial_capacity
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _check_key(key: object) -> None:
        if key is None:
            raise NullKeyError()

    def _find(self, key: K) -> Tuple[int, int]:
        """Return (bucket, position) of `key`; position is -1 when absent."""
        b = bucket_index(key, len(self._table))
        bucket = self._table[b]
        if bucket is not None:
            for pos, entry in enumerate(bucket):
                if entry.key is key or entry.key == key:
                    return b, pos
        return b, -1

    def _resize(self) -> None:
        """Double the bucket count until the load factor holds, then rehash."""
        old_table = self._table
        new_count = len(old_table) * 2
        while self._size / new_count > self._threshold:
            new_count *= 2

        new_table: List[_Bucket] = [None] * new_count
        for bucket in old_table:
            if bucket is None:
                continue
            for entry in bucket:
                idx = bucket_index(entry.key, new_count)
                target = new_table[idx]
                if target is None:
                    target = new_table[idx] = DynamicArray()
                target.append(entry)

        self._table = new_table
        logger.debug(
            "HashMap resized from %d to %d buckets (size=%d)",
            len(old_table), new_count, self._size,
        )

    # -----------------------------
    # Core operations
    # -----------------------------
    def get_entry(self, key: K) -> Optional[Entry[K, V]]:
        """Return the :class:`Entry` stored for `key`, or None if absent."""
        self._check_key(key)
        b, pos = self._find(key)
        if pos < 0:
            return None
        return self._table[b][pos]  # type: ignore[index]

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Return the value for `key`, or `default` if the key is absent.

        A stored None is returned as None, which is indistinguishable from a
        missing key under the default `default`.
        """
        entry = self.get_entry(key)
        return default if entry is None else entry.value

    def contains_key(self, key: K) -> bool:
        """Check if key exists in the map."""
        return self.get_entry(key) is not None

    def contains_value(self, value: object) -> bool:
        """Check if any entry holds `value`. O(n) over all buckets.

        None is matched by identity, anything else by identity or equality.
        """
        for entry in self.entries():
            if value is None:
                if entry.value is None:
                    return True
            elif entry.value is value or (entry.value is not None and entry.value == value):
                return True
        return False

    def put(self, key: K, value: V) -> Optional[V]:
        """Insert or update a key-value pair.

        Returns the previous value when the key was present, otherwise None.
        Adding a new key may trigger a resize.
        """
        self._check_key(key)
        b, pos = self._find(key)
        bucket = self._table[b]
        if pos >= 0:
            entry = bucket[pos]  # type: ignore[index]
            old = entry.value
            entry.value = value
            return old

        if bucket is None:
            bucket = self._table[b] = DynamicArray()
        bucket.append(Entry(key, value))
        self._size += 1
        if self._size / len(self._table) > self._threshold:
            self._resize()
        return None

    def remove(self, key: K) -> Optional[V]:
        """Remove `key` if present and return its value, otherwise None."""
        self._check_key(key)
        b, pos = self._find(key)
        if pos < 0:
            return None
        entry = self._table[b].swap_remove(pos)  # type: ignore[union-attr]
        self._size -= 1
        return entry.value

    def size(self) -> int:
        """Number of stored keys."""
        return self._size

    def buckets(self) -> int:
        """Number of buckets in the table."""
        return len(self._table)

    @property
    def threshold(self) -> float:
        return self._threshold

    def load_factor(self) -> float:
        return self._size / len(self._table)

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def entries(self) -> Iterator[Entry[K, V]]:
        for bucket in self._table:
            if bucket:
                yield from bucket

    def items(self) -> Iterator[Tuple[K, V]]:
        for entry in self.entries():
            yield entry.key, entry.value

    def keys(self) -> Iterator[K]:
        for entry in self.entries():
            yield entry.key

    def values(self) -> Iterator[V]:
        for entry in self.entries():
            yield entry.value

    # -----------------------------
    # Mapping protocol
    # -----------------------------
    def __getitem__(self, key: K) -> V:
        entry = self.get_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: K) -> bool:
        return self.contains_key(key)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{pairs}}})"
